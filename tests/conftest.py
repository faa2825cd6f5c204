import pytest

from seqinsight.core.analysis_engine import SequenceAnalysisEngine
from seqinsight.core.knowledge_base import build_knowledge_base
from seqinsight.settings import Settings


@pytest.fixture(scope="session")
def config():
    return Settings()


@pytest.fixture(scope="session")
def knowledge_base(config):
    return build_knowledge_base(config)


@pytest.fixture
def engine(knowledge_base, config):
    return SequenceAnalysisEngine(knowledge_base=knowledge_base, config=config)
