from abc import ABC, abstractmethod
from typing import List, NamedTuple, Tuple, Dict, Any

from lexsim.text_processor import Profile


class DocumentFailure(NamedTuple):
    """A document that could not be profiled, with the stage that failed."""
    document: str
    stage: str
    reason: str


class CorpusBuildError(RuntimeError):
    """Raised in fail-fast mode when a document cannot be profiled."""
    def __init__(self, failure: DocumentFailure):
        super().__init__(f"{failure.stage} failed for {failure.document}: {failure.reason}")
        self.failure = failure


class BaseCorpus(ABC):
    @property
    @abstractmethod
    def doc_count(self) -> int: ...

    @property
    @abstractmethod
    def vocab_size(self) -> int: ...

    @property
    @abstractmethod
    def names(self) -> List[str]: ...

    @property
    @abstractmethod
    def profiles(self) -> List[Profile]: ...

    @abstractmethod
    def build(self, documents: List[str]): ...

    @abstractmethod
    def add_document(self, name: str, profile: Profile) -> int: ...

    @abstractmethod
    def get_most_frequent_terms(self, n: int = 10) -> List[Tuple[str, int]]: ...

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]: ...
