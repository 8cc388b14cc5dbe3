#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Errors raised by wikirender.

Every error derives from :class:`WikiRenderError`, so callers that only care
whether rendering succeeded can catch that one class. The command line maps
each branch of the tree to its own exit code.

Exception Hierarchy
-------------------
- WikiRenderError

  - ValidationError: a parameter or option value was rejected
    - InvalidOptionsError: options object built for another dialect
    - ConfigurationError: config file, option or metadata value is unusable

  - FileError: the input file could not be read

  - FormatError: no dialect is registered under the requested name

  - ParsingError: the serialized document tree could not be loaded

  - RenderingError: the render itself went wrong
    - OutputWriteError: the rendered text could not be written

Node kinds a dialect has no rule for are not errors. They render as an empty
string and are reported through the ``wikirender`` loggers. Raw content for
a foreign format is dropped without any report at all.

"""

from typing import Any


class WikiRenderError(Exception):
    """Root of the wikirender error tree.

    Parameters
    ----------
    message : str
        Text shown to the user.
    original_error : Exception, optional
        Lower-level exception being wrapped, kept for debugging.

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(WikiRenderError):
    """A value supplied by the caller was rejected.

    ``parameter_name`` and ``parameter_value`` record what was rejected when
    the raiser knows it; both default to None.
    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Options object does not belong to the dialect being rendered.

    Parameters
    ----------
    renderer_name : str
        Dialect or renderer that rejected the options.
    expected_type : type
        Options class that dialect reads.
    received_type : type
        Class of the object actually passed.
    message : str, optional
        Overrides the generated message.
    original_error : Exception, optional
        Lower-level exception being wrapped.

    """

    def __init__(
        self,
        renderer_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{renderer_name} renders with {expected_type.__name__}, "
                f"got {received_type.__name__} instead"
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.renderer_name = renderer_name
        self.expected_type = expected_type
        self.received_type = received_type


class ConfigurationError(ValidationError):
    """Configuration that cannot be honoured.

    Covers unreadable or malformed config files, option values outside their
    allowed set and an ``image_format`` metadata entry naming an unknown
    format. It is always raised before the first block is rendered.
    """


class FileError(WikiRenderError):
    """The input document could not be read from ``file_path``."""

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FormatError(WikiRenderError):
    """No dialect is registered under ``format_type``.

    Parameters
    ----------
    message : str, optional
        Overrides the generated message.
    format_type : str, optional
        Name that was looked up.
    supported_formats : list[str], optional
        Names that would have been accepted, listed in the message.
    original_error : Exception, optional
        Lower-level exception being wrapped.

    """

    def __init__(
        self,
        message: str | None = None,
        format_type: str | None = None,
        supported_formats: list[str] | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = f"Unknown output dialect '{format_type}'" if format_type else "Unknown output dialect"
            if format_type and supported_formats:
                message = f"{message} (available: {', '.join(supported_formats)})"
        super().__init__(message, original_error=original_error)
        self.format_type = format_type
        self.supported_formats = supported_formats


class ParsingError(WikiRenderError):
    """A serialized document tree could not be turned back into nodes.

    ``parsing_stage`` names the step that failed: ``"json"`` for the text
    itself, ``"schema"`` for the envelope, ``"deserialize"`` for individual
    nodes and ``"document"`` for a root that is not a Document.
    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(WikiRenderError):
    """Rendering failed part way through.

    ``rendering_stage`` names the component that failed, for example
    ``"lists"`` or ``"footnotes"`` when per-render state is left unbalanced.
    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderingError):
    """Rendered text could not be written to ``file_path``."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        super().__init__(
            message or f"Cannot write output to {file_path}",
            rendering_stage="file_write",
            original_error=original_error,
        )
        self.file_path = file_path


__all__ = [
    "WikiRenderError",
    "ValidationError",
    "InvalidOptionsError",
    "ConfigurationError",
    "FileError",
    "FormatError",
    "ParsingError",
    "RenderingError",
    "OutputWriteError",
]
