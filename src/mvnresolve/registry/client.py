from abc import ABC, abstractmethod
from typing import Optional

from ..domain.models import ArtifactIdentifier, ResolvedArtifact


class ArtifactRepository(ABC):
    @abstractmethod
    async def resolve(self, identifier: ArtifactIdentifier) -> Optional[ResolvedArtifact]:
        """Get the published versions of an artifact, or None if it does not exist."""
        pass
