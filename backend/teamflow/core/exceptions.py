"""
Custom Exceptions for TeamFlow
==============================

Services raise these instead of HTTPException so the same error can be
produced by the API, tests, or any other caller. The API layer turns any
TeamFlowError into a JSON response with ``http_status``.

Usage:
    from teamflow.core.exceptions import TemplateNotFoundError, MissingVariableError

    if not template:
        raise TemplateNotFoundError(template_id)

    try:
        await engine.generate(...)
    except MissingVariableError as e:
        logger.warning(f"Generation rejected: {e}")
        raise
"""

from typing import Optional, Any, Dict


class TeamFlowError(Exception):
    """Base exception for all TeamFlow errors"""

    http_status: int = 500

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# ============================================
# Authorization Errors
# ============================================

class AuthorizationError(TeamFlowError):
    """User not authorized for this action"""

    http_status = 403

    def __init__(self, message: str = "Not authorized"):
        super().__init__(message, code="NOT_AUTHORIZED")


# ============================================
# Resource Errors (404-type)
# ============================================

class ResourceNotFoundError(TeamFlowError):
    """Base class for not found errors"""

    http_status = 404

    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(
            f"{resource_type} with ID '{resource_id}' not found",
            code=f"{resource_type.upper()}_NOT_FOUND",
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class TemplateNotFoundError(ResourceNotFoundError):
    """Template not found"""

    def __init__(self, template_id: Any):
        super().__init__("Template", template_id)


class TeamNotFoundError(ResourceNotFoundError):
    """Team not found"""

    def __init__(self, team_id: Any):
        super().__init__("Team", team_id)


class ProjectNotFoundError(ResourceNotFoundError):
    """Project not found"""

    def __init__(self, project_id: Any):
        super().__init__("Project", project_id)


# ============================================
# Validation Errors (400-type)
# ============================================

class ValidationError(TeamFlowError):
    """Input validation failed"""

    http_status = 400

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, code="VALIDATION_ERROR", details=details)


class MissingVariableError(ValidationError):
    """A template placeholder has no value in the generation variables"""

    def __init__(self, name: str):
        super().__init__(f"Missing value for template variable '{name}'", field="variables")
        self.code = "MISSING_VARIABLE"
        self.name = name
        self.details["variable"] = name


# ============================================
# Persistence Errors
# ============================================

class PersistenceError(TeamFlowError):
    """Database write failed"""

    def __init__(self, message: str):
        super().__init__(message, code="PERSISTENCE_ERROR")


class GenerationPersistenceError(PersistenceError):
    """Writing generated rows failed; everything from the call was rolled back"""

    def __init__(self, template_id: Any, message: str = "Failed to generate projects from template"):
        super().__init__(message)
        self.code = "GENERATION_FAILED"
        self.details["template_id"] = template_id


# ============================================
# Helper function for API responses
# ============================================

def error_response(error: TeamFlowError) -> Dict[str, Any]:
    """Convert exception to API error response format"""
    return {
        "success": False,
        "error": error.to_dict()
    }
