from typing import Optional, Dict, Any

class VerifierException(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)
    
    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details
        }

class ConfigurationError(VerifierException):
    pass

class NotConfiguredError(ConfigurationError):
    def __init__(self, reason: str = "Reasoning engine credential not configured"):
        super().__init__(reason, {"reason": reason})

class InvalidInputError(VerifierException):
    def __init__(self, field: str, reason: str):
        super().__init__(
            f"Invalid input for {field}: {reason}",
            {"field": field, "reason": reason}
        )

class InvocationError(VerifierException):
    def __init__(self, reason: str, tier: Optional[str] = None, recoverable: bool = True):
        self.reason = reason
        self.tier = tier
        where = f" ({tier})" if tier else ""
        super().__init__(
            f"Reasoning engine call failed{where}: {reason}",
            {"reason": reason, "tier": tier, "recoverable": recoverable}
        )

class FallbackInvocationError(InvocationError):
    def __init__(self, reason: str):
        super().__init__(reason, tier="fallback", recoverable=False)
