"""Resource wrappers for the Penpoint API."""

from .discrete_references import DiscreteReferencesResource
from .files import FilesResource

__all__ = ["DiscreteReferencesResource", "FilesResource"]
