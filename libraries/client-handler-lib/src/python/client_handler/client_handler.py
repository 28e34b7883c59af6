import httpx
import logging
from abc import ABC
from http import HTTPStatus
from time import time
from typing import Any, Iterable, Optional, Sequence, TypeVar
from urllib.parse import quote
from pydantic import TypeAdapter, ValidationError
from managed_exceptions import ManagedException, InternalErrorException, TransportException, UpstreamException
from prometheus_client import Counter, Histogram
from .error_response import ErrorResponse

API_EXE_COUNTER = Counter("lcc_client_exe_total", "Total number of API requests executed", ["handler", "method"])
API_EXE_DURATION_HISTOGRAM = Histogram("lcc_client_exe_duration_seconds", "Duration of API requests in seconds", ["handler", "method"])
API_EXE_ERROR_COUNTER = Counter("lcc_client_exe_error_total", "Total number of API requests that resulted in error", ["handler", "status_code"])

T = TypeVar("T")

class ClientHandler(ABC):
    """
    Synchronous HTTP client for talking to many hosts through one connection pool.

    Unlike a client bound to a single service, every call names the base URL it
    is routed to, so one handler can serve every member of a cluster.

    Failures are normalised into managed exceptions:
    - `UpstreamException` when the host answered with a status code outside `expect`.
    - `TransportException` when the host could not be reached or its body could not be parsed.
    """

    def __init__(self, default_timeout: float = 10.0, transport: Optional[httpx.BaseTransport] = None):
        self.__logger = logging.getLogger(self.__class__.__name__)
        self.__http_client = httpx.Client(timeout=default_timeout, transport=transport)

    def invoke(self,
               method: str,
               base_url: str,
               path: str,
               path_params: Sequence[Any] = (),
               body: Optional[dict] = None,
               params: Optional[dict] = None,
               expect: Iterable[int] = (HTTPStatus.OK,),
               timeout: Optional[float] = None,
               headers: Optional[dict] = None) -> httpx.Response:
        start_time: float = time()
        API_EXE_COUNTER.labels(handler=self.__class__.__name__, method=method).inc()
        url: str = f"{base_url.rstrip('/')}{self.format_path(path, path_params)}"
        expected_codes: set[int] = {int(code) for code in expect}
        try:
            self.__logger.debug(f"[EXTERNAL] Full Request: <{method} {url} | {body}>")

            # Execute HTTP request
            try:
                response = self.__http_client.request(
                    method,
                    url,
                    json=body,
                    params=params,
                    timeout=timeout or httpx.USE_CLIENT_DEFAULT,
                    headers=headers
                )
            except httpx.HTTPError as e:
                raise TransportException(
                    message=f"Could not reach {url}",
                    diagnostic_details={"url": url, "reason": str(e) or e.__class__.__name__}
                ) from e

            if response.status_code in expected_codes:
                self.__logger.debug(f"[EXTERNAL] Full Response: <{response.status_code} | {method} {url}>")
                return response

            # Unexpected status code
            response_data: dict = self.__safe_json(response)
            raise UpstreamException(
                http_status=self.__to_http_status(response.status_code),
                message=response_data.get("message", "") or f"Unexpected status {response.status_code} from {url}",
                diagnostic_code=response_data.get("diagnostic_code", "") or str(response.status_code),
                diagnostic_details={"url": url, **{k: str(v) for k, v in (response_data.get("diagnostic_details") or {}).items()}},
            )
        except ManagedException as e1:
            actual_error_response: ErrorResponse = self.__get_error_response(e1)
            self.__logger.info(f"Full Response: <{e1.status_code} | {actual_error_response}>")
            API_EXE_ERROR_COUNTER.labels(handler=self.__class__.__name__, status_code=int(e1.status_code)).inc()
            raise
        finally:
            duration: float = time() - start_time
            API_EXE_DURATION_HISTOGRAM.labels(handler=self.__class__.__name__, method=method).observe(duration)

    def parse(self, response: httpx.Response, response_type: type[T]) -> T:
        """Deserialize a response body into `response_type` (plain text when it is `str`)."""
        if response_type is str:
            return response.text # type: ignore[return-value]
        try:
            return TypeAdapter(response_type).validate_python(response.json())
        except (ValueError, ValidationError) as e:
            raise TransportException(
                message=f"Could not parse response from {response.request.url}",
                diagnostic_details={"url": str(response.request.url), "reason": str(e)}
            ) from e

    @staticmethod
    def format_path(path: str, path_params: Sequence[Any] = ()) -> str:
        """Fill positional `{0}`-style placeholders with URL-quoted values."""
        if not path_params:
            return path
        return path.format(*(quote(str(param), safe="") for param in path_params))

    def __safe_json(self, response: httpx.Response) -> dict:
        try:
            data = response.json()
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    def __to_http_status(self, status_code: int) -> HTTPStatus:
        try:
            return HTTPStatus(status_code)
        except ValueError:
            return HTTPStatus.BAD_GATEWAY

    def __get_error_response(self, exception: Exception) -> ErrorResponse:
        if isinstance(exception, ManagedException):
            managed_exception = exception
        else:
            managed_exception = InternalErrorException(str(exception))

        return ErrorResponse(
            status_code=int(managed_exception.status_code),
            diagnostic_code=managed_exception.diagnostic_code,
            diagnostic_details=managed_exception.diagnostic_details,
            message=str(managed_exception)
        )
