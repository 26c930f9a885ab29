"""Topicount error types."""


class TopicountError(Exception):
    """Base error for all topicount failures."""


class DictionaryError(TopicountError):
    """Dictionary resource missing, unreadable or empty."""


class BundleVersionError(DictionaryError):
    """Bundle manifest version mismatch."""


class BundleChecksumError(DictionaryError):
    """Bundle file checksum verification failed."""


class ExtractionError(TopicountError):
    """Document text could not be extracted."""


class UnsupportedFormatError(ExtractionError):
    """No extractor for the document's file extension."""
