"""
Base Service

Request plumbing shared by every IAM resource service: coercing and
validating parameters, rendering query strings, sending through the
session, checking the status and decoding the body.
"""

from contextlib import contextmanager
from enum import Enum
from functools import lru_cache
from typing import (
    Any,
    Collection,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
    Union,
)

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from akamai_iam.core.error_codes import ErrorCode, get_error_info
from akamai_iam.core.exceptions import APIException, RequestException, ValidationException
from akamai_iam.core.logger import get_logger, operation_context
from akamai_iam.errors import APIError

logger = get_logger(__name__)

PATH_PREFIX = "/identity-management"

M = TypeVar("M", bound=BaseModel)
Params = Union[BaseModel, Mapping[str, Any], None]


@lru_cache(maxsize=None)
def _adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(result_type)


def client_segment(client_id: Optional[str]) -> str:
    """Path segment for an API client; the caller's own client when unset."""
    return client_id or "self"


class BaseService:
    """Common base for the resource services of the IAM client."""

    def __init__(self, session: httpx.Client):
        self.session = session

    @contextmanager
    def _operation(self, op: ErrorCode) -> Iterator[None]:
        with operation_context(op.value):
            logger.debug("%s", op)
            yield

    def _parse(
        self,
        op: ErrorCode,
        model_cls: Type[M],
        params: Params,
        fields: Optional[Mapping[str, Any]] = None,
    ) -> M:
        """
        Coerce ``params`` (or keyword ``fields``) into ``model_cls``.

        A ``model_cls`` instance is validated again, nested models included,
        so changes made after construction are checked too. Every violation
        is collected into a single ValidationException.
        """
        data: Any = {}
        if isinstance(params, model_cls) and not fields:
            data = params
        elif isinstance(params, BaseModel):
            data.update({name: getattr(params, name) for name in params.model_fields_set})
        elif params is not None:
            data.update(params)
        if fields:
            data.update(fields)

        try:
            return model_cls.model_validate(data)
        except ValidationError as exc:
            error = ValidationException.from_validation_error(op, exc)
            logger.debug("%s", error)
            raise error from exc

    @staticmethod
    def _query(**values: Any) -> List[Tuple[str, str]]:
        """
        Render query parameters sorted by key.

        ``None`` values are left out; booleans become ``true``/``false``.
        """
        pairs: List[Tuple[str, str]] = []
        for key in sorted(values):
            value = values[key]
            if value is None:
                continue
            if isinstance(value, bool):
                rendered = "true" if value else "false"
            elif isinstance(value, Enum):
                rendered = str(value.value)
            else:
                rendered = str(value)
            pairs.append((key, rendered))
        return pairs

    def _send(
        self,
        op: ErrorCode,
        method: str,
        path: str,
        *,
        accepted: Collection[int] = (200,),
        query: Optional[List[Tuple[str, str]]] = None,
        body: Any = None,
        result: Any = None,
    ) -> Any:
        """
        Send one request and decode the response into ``result``.

        Args:
            op: Operation code used in messages and logs
            method: HTTP method
            path: Path below ``/identity-management``
            accepted: Statuses treated as success; anything else is an APIError
            query: Rendered query parameters
            body: JSON-serializable request body
            result: Type to decode the body into, None to ignore the body

        Returns:
            The decoded body, or None when ``result`` is None or the body is empty

        Raises:
            RequestException: The request failed or the body could not be decoded
            APIException: The status is not in ``accepted``
        """
        url = f"{PATH_PREFIX}{path}"
        try:
            response = self.session.request(method, url, params=query or None, json=body)
        except httpx.HTTPError as exc:
            raise RequestException.wrap(
                exc, f"{op}: request failed: {exc}", op, method=method, path=url
            ) from exc

        if response.status_code not in accepted:
            error = APIError.from_response(response)
            failure = APIException(op, error, details={"method": method, "path": url})
            logger.warning(
                "%s failed with status %s",
                op,
                response.status_code,
                extra={**get_error_info(op), "iam_error": failure.to_dict()},
            )
            raise failure from error

        # 204 and other empty bodies decode to nothing
        if result is None or not response.content:
            return None

        try:
            return _adapter(result).validate_json(response.content)
        except ValidationError as exc:
            raise RequestException.wrap(
                exc, f"{op}: request failed: {exc}", op, method=method, path=url
            ) from exc
