from abc import ABC, abstractmethod
from typing import List
from cheers.brand.brand_models import ClassificationResult


class BrandLookupUnavailable(RuntimeError):
    """Le service de lookup ne peut pas répondre (ex. API distante absente)."""


class BaseBrandLookup(ABC):
    name: str

    @abstractmethod
    def classify(self, query: str) -> ClassificationResult:
        pass

    @abstractmethod
    def suggest(self, query: str) -> List[str]:
        pass
