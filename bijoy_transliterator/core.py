"""
Bijoy Transliterator Core Engine

The main orchestrator that detects input types and routes them to the
appropriate converter. Supports Word documents (.docx), plain-text files and
directories of either, in both directions between SutonnyMJ/Bijoy and
Unicode Bengali.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import ConversionOptions, Direction
from .converters.bijoy_to_unicode import convert_bijoy_to_unicode
from .converters.office_converter import ConversionReport, OfficeConverter
from .converters.unicode_to_bijoy import convert_segments

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {".txt", ".md", ".csv"}


class FileStatus(Enum):
    PENDING = "pending"
    CONVERTING = "converting"
    CONVERTED = "converted"
    ERROR = "error"


@dataclass
class FileResult:
    """Conversion state of one input file."""
    source: str
    status: FileStatus = FileStatus.PENDING
    output_path: Optional[str] = None
    report: Optional[ConversionReport] = None
    text: Optional[str] = None  # converted content of a text file
    error: Optional[str] = None


class Transliterator:
    """
    Main transliterator engine.

    Accepts a file path or a directory and converts its Bengali text in the
    configured direction.
    """

    def __init__(self, output_dir: str = None, options: Optional[ConversionOptions] = None):
        self.output_dir = output_dir or os.path.join(os.getcwd(), "bijoy_output")
        self.options = options or ConversionOptions()

    def convert(self, source: str, save: bool = True) -> list[FileResult]:
        """
        Convert a file or every supported file in a directory.

        Args:
            source: File or directory path
            save: If True, write converted files to the output directory

        Returns:
            One FileResult per file
        """
        source = source.strip()

        if os.path.isdir(source):
            logger.info("[DIR] Converting all supported files in: %s", source)
            return self.convert_directory(source, save=save)

        if os.path.isfile(source):
            return self.convert_pending([FileResult(source=source)], save=save)

        raise ValueError(
            f"Cannot handle source: {source}\n"
            f"Provide a valid file or directory path."
        )

    def convert_directory(self, dir_path: str, save: bool = True) -> list[FileResult]:
        """Convert all supported files in a directory."""
        results = [
            FileResult(source=os.path.join(dir_path, filename))
            for filename in sorted(os.listdir(dir_path))
            if os.path.isfile(os.path.join(dir_path, filename))
            and self.is_supported(filename)
        ]
        return self.convert_pending(results, save=save)

    def convert_pending(self, results: list[FileResult], save: bool = True) -> list[FileResult]:
        """
        Convert every result that is pending or failed before.

        A failure is recorded on its FileResult and never stops the batch, so
        calling this again retries only the files that went wrong.
        """
        for result in results:
            if result.status not in (FileStatus.PENDING, FileStatus.ERROR):
                continue

            result.status = FileStatus.CONVERTING
            result.error = None
            try:
                self._convert_file(result, save=save)
                result.status = FileStatus.CONVERTED
            except Exception as e:
                logger.error("[ERROR] Failed to convert %s: %s", result.source, e)
                result.status = FileStatus.ERROR
                result.error = str(e)
        return results

    def convert_text(self, text: str) -> str:
        """Convert a string in the configured direction."""
        if self.options.to_unicode:
            return convert_bijoy_to_unicode(text)
        segments = convert_segments(text, font=self.options.legacy_font)
        return "".join(segment.output for segment in segments)

    def _convert_file(self, result: FileResult, save: bool) -> None:
        """Route a file to the appropriate converter."""
        file_path = result.source
        output_path = None
        if save:
            os.makedirs(self.output_dir, exist_ok=True)
            output_path = os.path.join(
                self.output_dir, _output_name(file_path, self.options.direction)
            )

        if OfficeConverter.can_handle(file_path):
            logger.info("[DOCX] Converting: %s", file_path)
            result.report = OfficeConverter.convert(file_path, output_path, self.options)
            for part, reason in result.report.failed_parts.items():
                logger.warning("[PART] %s could not be converted: %s", part, reason)

        elif _is_text_file(file_path):
            logger.info("[TXT] Converting: %s", file_path)
            with open(file_path, "r", encoding="utf-8", errors="replace") as f:
                content = f.read()
            result.text = self.convert_text(content)
            if output_path is not None:
                with open(output_path, "w", encoding="utf-8") as f:
                    f.write(result.text)

        else:
            raise ValueError(f"Unsupported file type: {file_path}")

        if output_path is not None:
            result.output_path = output_path
            logger.info("[SAVED] %s", output_path)

    @staticmethod
    def is_supported(file_path: str) -> bool:
        return OfficeConverter.can_handle(file_path) or _is_text_file(file_path)

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported formats."""
        return {
            "Word Documents": sorted(OfficeConverter.SUPPORTED_EXTENSIONS),
            "Plain Text": sorted(TEXT_EXTENSIONS),
        }


def _is_text_file(file_path: str) -> bool:
    _, ext = os.path.splitext(file_path.lower())
    return ext in TEXT_EXTENSIONS


def _output_name(file_path: str, direction: Direction) -> str:
    """Name the converted file after its source and the target encoding."""
    basename = os.path.basename(file_path)
    name, ext = os.path.splitext(basename)
    suffix = "unicode" if direction is Direction.BIJOY_TO_UNICODE else "bijoy"
    return f"{name}_{suffix}{ext}"
