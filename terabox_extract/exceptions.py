"""
Exceptions raised by the extraction pipeline.
"""


class ExtractionError(Exception):
    """Base exception for recognized extraction failures."""

    kind = "ExtractionError"
    default_message = "Failed to extract information"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidUrlError(ExtractionError):
    """URL does not parse or its host is not a known Terabox domain."""
    kind = "InvalidUrl"
    default_message = "Invalid TeraBox URL"


class FetchFailedError(ExtractionError):
    """The share page could not be fetched."""
    kind = "FetchFailed"
    default_message = "Failed to fetch share page"


class IdentifierNotFoundError(ExtractionError):
    kind = "IdentifierNotFound"
    default_message = "Could not extract file ID"


class PageDataNotFoundError(ExtractionError):
    kind = "PageDataNotFound"
    default_message = "Could not extract file info: page data not found"


class PageDataInvalidError(ExtractionError):
    kind = "PageDataInvalid"
    default_message = "Could not extract file info: page data is not valid JSON"


class EmptyFileListError(ExtractionError):
    kind = "EmptyFileList"
    default_message = "Could not extract file info: share contains no files"
