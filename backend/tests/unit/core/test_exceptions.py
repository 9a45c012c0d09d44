from teamflow.core.exceptions import (
    GenerationPersistenceError,
    MissingVariableError,
    TeamFlowError,
    TeamNotFoundError,
    TemplateNotFoundError,
    ValidationError,
    error_response,
)


class TestExceptionHierarchy:

    def test_not_found_errors(self):
        error = TemplateNotFoundError(7)

        assert error.http_status == 404
        assert error.code == "TEMPLATE_NOT_FOUND"
        assert error.details == {"resource_type": "Template", "resource_id": 7}
        assert TeamNotFoundError(3).code == "TEAM_NOT_FOUND"

    def test_missing_variable_names_the_variable(self):
        error = MissingVariableError("manager")

        assert isinstance(error, ValidationError)
        assert error.http_status == 400
        assert error.code == "MISSING_VARIABLE"
        assert error.name == "manager"
        assert error.details["variable"] == "manager"
        assert "'manager'" in error.message

    def test_generation_persistence_error(self):
        error = GenerationPersistenceError(7)

        assert isinstance(error, TeamFlowError)
        assert error.http_status == 500
        assert error.code == "GENERATION_FAILED"
        assert error.details["template_id"] == 7

    def test_error_instances_do_not_share_details(self):
        first = MissingVariableError("a")
        second = ValidationError("bad", field="name")

        assert "variable" not in second.details
        assert first.details["field"] == "variables"


class TestErrorResponse:

    def test_shape(self):
        body = error_response(ValidationError("Name required", field="name"))

        assert body == {
            "success": False,
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Name required",
                "details": {"field": "name"},
            },
        }
