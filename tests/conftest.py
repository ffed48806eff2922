import pytest

from trellis import CompilerOptions, RefsStore


@pytest.fixture(scope="function")
def refs() -> RefsStore:
    return RefsStore()


@pytest.fixture(scope="function")
def options() -> CompilerOptions:
    return CompilerOptions()


@pytest.fixture(scope="function")
def camel_options() -> CompilerOptions:
    return CompilerOptions(to_camel_case=True)
