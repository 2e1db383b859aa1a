import asyncio
import logging
from typing import Iterable, List, Optional
from urllib.parse import urljoin

import httpx

from .client import ArtifactRepository
from ..domain.errors import (
    AuthenticationError,
    InvalidRequestUrlError,
    TransportError,
    UnexpectedStatusError,
)
from ..domain.models import ArtifactIdentifier, Credentials, ResolvedArtifact
from ..metadata.decoder import decode_metadata

logger = logging.getLogger(__name__)


class MavenRepository(ArtifactRepository):
    """a remote maven repository reached over http with basic auth."""

    def __init__(self, base_url: str, credentials: Credentials, client: httpx.AsyncClient):
        """
        args:
            base_url: repository root. a trailing slash marks it as a directory,
                without one the last path segment is replaced when joining.
            credentials: basic auth credentials sent with every request
            client: shared http client, owned by the caller
        """
        self.base_url = base_url
        self.credentials = credentials
        self.client = client

    def metadata_url(self, identifier: ArtifactIdentifier) -> str:
        """
        resolve the artifact's metadata path against the base url.

        raises:
            InvalidRequestUrlError: if the result is not below the base url's directory,
                e.g. a group starting with `//` turning into a reference to another host
        """
        url = urljoin(self.base_url, identifier.metadata_path)
        if not url.startswith(urljoin(self.base_url, ".")):
            raise InvalidRequestUrlError(url, f"'{identifier}' resolves outside of {self.base_url}")
        return url

    async def resolve(self, identifier: ArtifactIdentifier) -> Optional[ResolvedArtifact]:
        """
        fetch and decode the metadata of an artifact.

        returns:
            the resolved artifact, or None if the repository answers 404

        raises:
            AuthenticationError: on 401
            UnexpectedStatusError: on any other non-200 status
            MetadataDecodeError: if the 200 body is not a metadata document
            InvalidRequestUrlError: if no valid request url can be built
            TransportError: if the request or body read fails
        """
        logger.info(f"resolving artifact: {identifier}")
        url = self.metadata_url(identifier)
        logger.debug(f"requesting metadata from url: {url}")

        auth = httpx.BasicAuth(
            self.credentials.username, self.credentials.password.get_secret_value()
        )
        try:
            response = await self.client.get(url, auth=auth)
        except httpx.InvalidURL as e:
            raise InvalidRequestUrlError(url, str(e)) from e
        except httpx.RequestError as e:
            logger.debug(f"request to {url} failed: {e!r}")
            raise TransportError(url, e) from e

        status = response.status_code
        if status == httpx.codes.OK:
            return decode_metadata(response.content).to_resolved()
        if status == httpx.codes.NOT_FOUND:
            logger.info(f"artifact not found: {identifier}")
            return None
        if status == httpx.codes.UNAUTHORIZED:
            raise AuthenticationError(url)
        raise UnexpectedStatusError(status, url)

    async def resolve_many(
        self, identifiers: Iterable[ArtifactIdentifier]
    ) -> List[Optional[ResolvedArtifact]]:
        """
        resolve several artifacts concurrently, results in input order.

        the first error propagates once the remaining resolutions are cancelled and awaited.
        """
        tasks = [asyncio.ensure_future(self.resolve(i)) for i in identifiers]
        try:
            return list(await asyncio.gather(*tasks))
        finally:
            pending = [t for t in tasks if not t.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
