# -*- coding: utf-8 -*-
"""
Inference API Client
====================

Sends a completed assessment to the risk inference service and returns the
raw JSON result.
"""

import json
from dataclasses import dataclass
from typing import Optional, Dict, Any

import requests

from pcos_assessment.services.exceptions import ApiException, NetworkException
from pcos_assessment.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class ApiConfig:
    """
    Inference service connection settings.

    Reads defaults from Config (which reads .env):
        INFERENCE_API_URL=http://localhost:8000/api
        INFERENCE_API_TIMEOUT=30
        INFERENCE_API_MAX_RETRIES=2
    """
    base_url: str = None
    timeout: int = None
    max_retries: int = None
    api_version: str = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from pcos_assessment.app.config import Config

        if self.base_url is None:
            self.base_url = Config.INFERENCE_API_URL
        if self.timeout is None:
            self.timeout = Config.INFERENCE_API_TIMEOUT
        if self.max_retries is None:
            self.max_retries = Config.INFERENCE_API_MAX_RETRIES
        if self.api_version is None:
            self.api_version = Config.INFERENCE_API_VERSION


class InferenceApiClient:
    """
    Client for the risk inference service.

    Usage:
        client = InferenceApiClient(ApiConfig(base_url="http://localhost:8000/api"))
        result = client.submit_assessment(context.to_dict())
    """

    def __init__(self, config: ApiConfig):
        if not config.base_url:
            raise ValueError("Inference API base URL is not configured")
        self.config = config
        self.base_url = config.base_url.rstrip('/')
        self.session = requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json"
        }

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None
    ) -> Any:
        """
        Execute one HTTP request with error mapping.

        Raises:
            ApiException: non-2xx response
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"
        logger.info(f"[API REQ] {method} {endpoint}")
        if json_data:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                json=json_data,
                headers=self._headers(),
                timeout=self.config.timeout
            )
            response.raise_for_status()

            result = response.json() if response.text else None
            logger.info(f"[API RES] {response.status_code} {endpoint}")
            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e,
                timed_out=isinstance(e, requests.exceptions.Timeout)
            )
        except ValueError as e:
            logger.error(f"Invalid JSON from {endpoint}: {e}")
            raise ApiException(message=f"Invalid JSON response: {e}")
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    def submit_assessment(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        POST an assessment and return the result JSON.

        Network errors are retried up to max_retries times; HTTP errors
        are not retried.
        """
        endpoint = f"/{self.config.api_version}/assessments"
        attempts = self.config.max_retries + 1

        for attempt in range(1, attempts + 1):
            try:
                result = self._request("POST", endpoint, json_data=payload)
                if not isinstance(result, dict):
                    raise ApiException("Empty or malformed inference result")
                return result
            except NetworkException:
                if attempt >= attempts:
                    raise
                logger.warning(f"Inference request failed (attempt {attempt}/{attempts}), retrying")
