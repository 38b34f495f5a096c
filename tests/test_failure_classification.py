"""Tests for the failure envelope."""

import pytest

from digideck.models.failure import (
    ApiResponse,
    ContainerMissingError,
    EmptyQueryError,
    FailureDetail,
    FailureKind,
    KnownError,
    OutcomeType,
    RemoteUnavailableError,
    create_success,
    create_unknown_failure,
    finalize_response,
    is_finalized,
)


class TestKnownErrors:
    def test_empty_query(self) -> None:
        error = EmptyQueryError()

        assert isinstance(error, KnownError)
        assert error.kind == FailureKind.EMPTY_QUERY
        assert error.status_code == 400
        assert str(error) == "Please enter a search term"

    def test_remote_unavailable(self) -> None:
        error = RemoteUnavailableError("http://test", detail="HTTP error! status: 503")

        assert error.kind == FailureKind.SERVICE_UNAVAILABLE
        assert error.status_code == 502
        assert error.url == "http://test"

    def test_container_missing(self) -> None:
        error = ContainerMissingError("pokemon")

        assert error.status_code == 404
        assert error.tab == "pokemon"

    def test_to_response_is_finalized(self) -> None:
        response = EmptyQueryError().to_response()

        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.EMPTY_QUERY
        assert is_finalized(response)


class TestAuthorityBoundary:
    def test_success_is_finalized(self) -> None:
        response = create_success({"count": 0})

        assert response.outcome == OutcomeType.SUCCESS
        assert is_finalized(response)

    def test_unknown_failure_reports_type_only(self) -> None:
        response = create_unknown_failure(RuntimeError("secret internals"))

        assert response.failure is not None
        assert response.failure.detail == "RuntimeError"
        assert "secret" not in response.model_dump_json()
        assert is_finalized(response)

    def test_success_with_failure_rejected(self) -> None:
        response: ApiResponse[dict] = ApiResponse(
            outcome=OutcomeType.SUCCESS,
            failure=FailureDetail(kind=FailureKind.UNKNOWN, message="x"),
        )

        with pytest.raises(ValueError, match="must not have failure"):
            finalize_response(response)

    def test_failure_without_detail_rejected(self) -> None:
        response: ApiResponse[dict] = ApiResponse(outcome=OutcomeType.KNOWN_FAILURE)

        with pytest.raises(ValueError, match="must have failure details"):
            finalize_response(response)

    def test_unfinalized_response(self) -> None:
        response: ApiResponse[dict] = ApiResponse(outcome=OutcomeType.SUCCESS)

        assert not is_finalized(response)

    def test_finalize_marks_only_that_response(self) -> None:
        finalized: ApiResponse[dict] = finalize_response(ApiResponse(outcome=OutcomeType.SUCCESS))
        fresh: ApiResponse[dict] = ApiResponse(outcome=OutcomeType.SUCCESS)

        assert is_finalized(finalized)
        assert not is_finalized(fresh)

    def test_rebuilt_response_is_not_finalized(self) -> None:
        """The flag does not survive serialization."""
        response = create_success({"count": 1})
        rebuilt = ApiResponse[dict].model_validate(response.model_dump())

        assert "_finalized" not in response.model_dump()
        assert "_finalized" not in response.model_dump_json()
        assert not is_finalized(rebuilt)

    def test_no_module_level_registry(self) -> None:
        """Finalizing many responses leaves no state behind in the module."""
        from digideck.models import failure as failure_module

        for count in range(100):
            create_success({"count": count})

        assert not hasattr(failure_module, "_finalized_responses")
