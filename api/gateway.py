from __future__ import annotations

import concurrent.futures
import logging
import threading
from typing import Any, Callable, Optional

from gradio_client import Client

from api.config import Settings
from api.errors import PredictionError, TransportFailure, UpstreamRejected, UpstreamTimeout
from api.parser import parse_yield
from api.schema import PredictionRequest

logger = logging.getLogger(__name__)


def first_element(result: Any) -> Any:
    """Gradio returns a bare value for one output and a tuple for several."""
    if isinstance(result, (list, tuple)):
        return result[0] if result else None
    return result


class InferenceGateway:
    """
    Client for the hosted crop-yield predictor (a Gradio Space).

    One attempt per call; the reply is awaited for at most `timeout` seconds.
    The Gradio client is created on first use and then reused.
    """

    def __init__(
        self,
        space: str,
        api_name: str = "/predict_yield",
        hf_token: Optional[str] = None,
        timeout: float = 30.0,
        client_factory: Callable[..., Any] = Client,
    ):
        self.space = space
        self.api_name = api_name
        self.timeout = timeout
        self._hf_token = hf_token
        self._client_factory = client_factory
        self._client = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> "InferenceGateway":
        return cls(
            space=settings.space,
            api_name=settings.api_name,
            hf_token=settings.hf_token,
            timeout=settings.timeout,
            **kwargs,
        )

    def _connect(self):
        with self._lock:
            if self._client is None:
                try:
                    self._client = self._client_factory(self.space, hf_token=self._hf_token)
                except Exception as e:
                    logger.error("Could not connect to %s: %s", self.space, e)
                    raise TransportFailure(detail=str(e)) from e
            return self._client

    def call(self, request: PredictionRequest) -> Any:
        """
        Send the request upstream and return the first element of the reply.
        Raises UpstreamRejected when the reply is an error string.
        """
        client = self._connect()
        try:
            job = client.submit(*request.upstream_args(), api_name=self.api_name)
        except Exception as e:
            logger.error("Could not submit to %s%s: %s", self.space, self.api_name, e)
            raise TransportFailure(detail=str(e)) from e

        try:
            result = job.result(timeout=self.timeout)
        except concurrent.futures.TimeoutError as e:
            job.cancel()
            logger.error("No reply from %s within %ss", self.space, self.timeout)
            raise UpstreamTimeout(detail=f"No reply within {self.timeout:g} seconds.") from e
        except PredictionError:
            raise
        except Exception as e:
            logger.error("Call to %s%s failed: %s", self.space, self.api_name, e)
            raise TransportFailure(detail=str(e)) from e

        reply = first_element(result)
        if isinstance(reply, str) and "Error" in reply:
            logger.error("Upstream error: %s", reply)
            raise UpstreamRejected(reply)
        return reply

    def predict_yield(self, request: PredictionRequest) -> float:
        reply = self.call(request)
        try:
            return parse_yield(reply)
        except PredictionError:
            logger.error("Upstream response could not be parsed: %r", reply)
            raise
