"""
Compiler options and the context manager supplying their defaults.
"""

from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import BaseModel, ConfigDict


class CompilerOptions(BaseModel):
    """
    Options threaded through every recursive compile call.

    Args:
        to_camel_case: Write camelCase property names for every field
            compiled under these options.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    to_camel_case: bool = False

    def with_camel_case(self) -> "CompilerOptions":
        if self.to_camel_case:
            return self
        return self.model_copy(update={"to_camel_case": True})


# Context variable for the default compile options
_default_options: ContextVar[CompilerOptions] = ContextVar(
    "compiler_options", default=CompilerOptions()
)


def current_options() -> CompilerOptions:
    """Options used by compile_schema() when none are passed."""
    return _default_options.get()


@contextmanager
def compiler_context(*, to_camel_case: bool = False):
    """
    Context manager for default compile options.

    Example:
        from trellis import Object, String, compile_schema, compiler_context

        schema = Object({"user_name": String()})

        with compiler_context(to_camel_case=True):
            compiled = compile_schema(schema)

        compiled.schema["properties"][0]["propertyName"]  # 'userName'
    """
    token = _default_options.set(CompilerOptions(to_camel_case=to_camel_case))
    try:
        yield
    finally:
        _default_options.reset(token)
