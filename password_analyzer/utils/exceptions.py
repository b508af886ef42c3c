"""
Custom exceptions for the Password Analyzer.

The scoring, crack-time and generation functions never raise for their
inputs; these cover the edges around them (config files, wordlists, CLI).
"""

class PasswordAnalyzerError(Exception):
    """Base exception for password analyzer errors"""
    pass


class ConfigError(PasswordAnalyzerError):
    """Error in configuration"""
    pass


class WordlistNotFoundError(PasswordAnalyzerError):
    """Wordlist file not found"""
    pass


class InvalidPolicyError(PasswordAnalyzerError):
    """Invalid password generation request"""
    pass
