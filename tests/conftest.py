import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from modinfo import BuildInfo, Module


@pytest.fixture
def sample_info() -> BuildInfo:
    """Build info with a main module, plain deps and a replaced dep."""
    return BuildInfo(
        main_path="example.com/tool/cmd/tool",
        main=Module(path="example.com/tool", version="v1.2.0", checksum="h1:main="),
        deps=[
            Module(path="golang.org/x/text", version="v0.3.7", checksum="h1:text="),
            Module(
                path="example.com/lib",
                version="v0.1.0",
                replace=Module(path="example.com/fork/lib", version="v0.1.1", checksum="h1:fork="),
            ),
            Module(path="rsc.io/quote", version="v1.5.2", checksum=""),
        ],
    )
