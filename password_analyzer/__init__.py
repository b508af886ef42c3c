"""
Password Analyzer

Scores password strength, estimates brute-force crack time and generates
random passwords to a configurable policy.
"""

from password_analyzer.core.strength import (
    StrengthResult,
    calculate_password_strength,
    strength_label,
    strength_percentage,
)
from password_analyzer.core.crack_time import estimate_crack_time
from password_analyzer.core.generator import (
    GenerationPolicy,
    PasswordGenerator,
    generate_password,
)
from password_analyzer.core.audit import WordlistAuditor

__version__ = "0.1.0"
