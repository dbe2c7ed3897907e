"""
Exceptions raised inside pitchparse.

None of these cross parse_document(); the pipeline and CLI map them to
failed ParseResults or exit codes.
"""


class PitchParseError(Exception):
    """Base class for pitchparse errors."""


class ExtractionError(PitchParseError):
    """A text-extraction engine could not read the input file."""


class ConfigurationError(PitchParseError):
    """Unknown extractor name or invalid setting."""
