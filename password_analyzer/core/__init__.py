"""
Core functionality for the Password Analyzer.
"""

from .strength import (
    COMMON_PASSWORDS,
    StrengthResult,
    calculate_password_strength,
    character_classes,
    strength_label,
    strength_percentage,
)
from .crack_time import GUESSES_PER_SECOND, estimate_crack_time
from .generator import GenerationPolicy, PasswordGenerator, generate_password
from .audit import AuditSummary, WordlistAuditor
