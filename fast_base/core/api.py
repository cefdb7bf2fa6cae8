from typing import TYPE_CHECKING, Any, Dict, Optional

from quart import g, request

from fast_base.exceptions.http_exceptions import UnprocessableEntityException

if TYPE_CHECKING:
    from fast_base.core.validation import Validation


def _check(validation: 'Validation', data: Dict[str, Any], *, error_type: str, file: Optional[str], translate: bool | str) -> Dict[str, Any]:
    checked = validation.copy(data)
    if not checked.check():
        file = file or checked.get_error_file_name() or "validation"
        raise UnprocessableEntityException(error_type=error_type, data=checked.errors(file, translate))
    return checked.get_data()


async def validate_request(validation: 'Validation', *, file: Optional[str] = None, translate: bool | str = True) -> Dict[str, Any]:
    """Validate the request body with the rules of `validation`.

    Args:
        validation: Configured validation; it is copied, never modified.
        file: Message file for the error messages. Defaults to the error file
            name of `validation`, then `validation`.
        translate: Passed to `Validation.errors()`.

    Returns:
        The validated data, also stored in `g.validated`.

    Raises:
        UnprocessableEntityException: If the request body is invalid.
    """
    json_data = await request.get_json(silent=True)
    if not isinstance(json_data, dict):
        json_data = {}

    g.validated = _check(validation, json_data, error_type="invalid_request", file=file, translate=translate)
    return g.validated


def validate_query(validation: 'Validation', *, file: Optional[str] = None, translate: bool | str = True) -> Dict[str, Any]:
    """Validate the request query parameters with the rules of `validation`.

    Stores the validated dictionary in `g.validated_query` and returns it.
    """
    # Convert MultiDict to a plain dict (first value wins per key)
    query_data = dict(request.args)
    g.validated_query = _check(validation, query_data, error_type="invalid_query", file=file, translate=translate)
    return g.validated_query
