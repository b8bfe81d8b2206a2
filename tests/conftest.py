import pytest

from cheers.brand.brand_models import BrandCatalog
from cheers.brand.catalog import DEFAULT_CATALOG
from cheers.brand.scorer import FuzzyIndex


@pytest.fixture
def catalog():
    return DEFAULT_CATALOG


@pytest.fixture
def index(catalog):
    return FuzzyIndex(catalog.records())


@pytest.fixture
def tiny_catalog():
    return BrandCatalog(owned=["Duff", "Fudd"], competitors=["Duff", "Buzz Beer"], aliases={"Duff Dry": "Duff"})
