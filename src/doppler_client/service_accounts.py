"""
Client for the workplace service account endpoints.
"""

from typing import Any, Dict, Optional, Union
from urllib.parse import quote
import logging

from doppler_client.http import ApiRequest, RequestExecutor
from doppler_client.models import (
    ServiceAccountBodyParams,
    ServiceAccountModel,
    ServiceAccounts,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20


class ServiceAccountsClient:
    """
    Client for /v3/workplace/service_accounts endpoints.

    Every method builds one request, hands it to the executor and decodes
    the response. Errors from the executor and from decoding are raised
    unchanged.
    """

    base_path = "/v3/workplace/service_accounts"

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def _item_path(self, slug: str) -> str:
        return f"{self.base_path}/service_account/{quote(slug, safe='')}"

    @staticmethod
    def _body(params: Union[ServiceAccountBodyParams, Dict[str, Any]]) -> Dict[str, Any]:
        if not isinstance(params, ServiceAccountBodyParams):
            params = ServiceAccountBodyParams.model_validate(params)
        return params.to_payload()

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ServiceAccounts:
        """
        List service accounts in the workplace.

        Args:
            page: Page number, 1 when absent or not positive
            limit: Page size, 20 when absent or not positive

        Returns:
            The list envelope
        """
        if page is None or page <= 0:
            page = DEFAULT_PAGE
        if limit is None or limit <= 0:
            limit = DEFAULT_PER_PAGE

        logger.debug("Listing service accounts page=%s per_page=%s", page, limit)
        request = ApiRequest.build(
            "GET",
            self.base_path,
            params={"page": page, "per_page": limit},
        )
        body = self._executor.execute(request)
        return ServiceAccounts.model_validate_json(body)

    def retrieve(self, slug: str) -> ServiceAccountModel:
        """Retrieve a service account by slug."""
        request = ApiRequest.build("GET", self._item_path(slug))
        body = self._executor.execute(request)
        return ServiceAccountModel.model_validate_json(body)

    def create(
        self,
        params: Union[ServiceAccountBodyParams, Dict[str, Any]],
    ) -> ServiceAccountModel:
        """
        Create a service account.

        Args:
            params: Name and workplace role (identifier OR permissions)

        Returns:
            Envelope holding the created account

        Raises:
            WorkplaceRoleConflictError: If the role has both an identifier
                and permissions; no request is sent
        """
        payload = self._body(params)
        logger.debug("Creating service account %s", payload.get("name"))
        request = ApiRequest.build("POST", self.base_path, json_data=payload)
        body = self._executor.execute(request)
        return ServiceAccountModel.model_validate_json(body)

    def update(
        self,
        slug: str,
        params: Union[ServiceAccountBodyParams, Dict[str, Any]],
    ) -> ServiceAccountModel:
        """Update a service account's name or workplace role."""
        payload = self._body(params)
        logger.debug("Updating service account %s", slug)
        request = ApiRequest.build("PATCH", self._item_path(slug), json_data=payload)
        body = self._executor.execute(request)
        return ServiceAccountModel.model_validate_json(body)

    def delete(self, slug: str) -> str:
        """
        Delete a service account.

        Returns:
            The raw response body as text. It is not decoded as JSON;
            bytes that are not valid UTF-8 are replaced with U+FFFD.
        """
        logger.debug("Deleting service account %s", slug)
        request = ApiRequest.build("DELETE", self._item_path(slug))
        body = self._executor.execute(request)
        return body.decode("utf-8", errors="replace")
