import sys
from pathlib import Path


def pytest_configure(config) -> None:
    project_root = Path(__file__).resolve().parents[1]
    sys.path.insert(0, str(project_root))
    config.addinivalue_line("markers", "performance: tokenizer throughput checks")
