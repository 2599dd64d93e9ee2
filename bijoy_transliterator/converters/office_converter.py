"""
Word (.docx) document converter.

Opens the package, hands every WordprocessingML part under word/ to the run
rewriter and writes a new package with the converted parts. Parts are
converted independently: one that fails to parse is kept as it was and
reported, and the rest of the document still converts.
"""

import io
import logging
import os
import posixpath
import zipfile
from dataclasses import dataclass, field
from typing import Optional

from ..config import PART_PREFIX, PART_SUFFIX, ConversionOptions, Direction
from .run_rewriter import ConversionError, MalformedPartError, PartResult, convert_part

logger = logging.getLogger(__name__)

STYLE_PARTS = {"styles.xml", "stylesWithEffects.xml"}


@dataclass
class ConversionReport:
    """What happened to each part of one document."""
    direction: Direction
    converted_parts: list[str] = field(default_factory=list)
    unchanged_parts: list[str] = field(default_factory=list)
    failed_parts: dict[str, str] = field(default_factory=dict)
    runs_converted: int = 0
    runs_split: int = 0
    runs_skipped: int = 0
    ambiguous_runs: int = 0
    structural_mismatches: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed_parts

    def record(self, part_name: str, result: PartResult) -> None:
        if result.changed:
            self.converted_parts.append(part_name)
        else:
            self.unchanged_parts.append(part_name)
        self.runs_converted += result.runs_converted
        self.runs_split += result.runs_split
        self.runs_skipped += result.runs_skipped
        self.ambiguous_runs += result.ambiguous_runs
        self.structural_mismatches += result.structural_mismatches

    def summary(self) -> str:
        text = (
            f"{len(self.converted_parts)} parts converted, "
            f"{self.runs_converted} runs converted, {self.runs_skipped} skipped"
        )
        if self.ambiguous_runs:
            text += f", {self.ambiguous_runs} ambiguous"
        if self.failed_parts:
            text += f", {len(self.failed_parts)} parts failed"
        return text


def is_convertible_part(name: str) -> bool:
    """True for archive entries the converter touches."""
    return name.startswith(PART_PREFIX) and name.endswith(PART_SUFFIX)


def is_style_part(name: str) -> bool:
    return posixpath.basename(name) in STYLE_PARTS


class OfficeConverter:
    """Converts the Bengali text of Word documents between Bijoy and Unicode."""

    SUPPORTED_EXTENSIONS = {".docx"}

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in OfficeConverter.SUPPORTED_EXTENSIONS

    @staticmethod
    def convert(
        file_path: str,
        output_path: Optional[str] = None,
        options: Optional[ConversionOptions] = None,
    ) -> ConversionReport:
        """
        Convert a .docx file.

        Args:
            file_path: Source document.
            output_path: Where to write the converted document. If None,
                nothing is written and only the report is returned.
            options: Direction and force mode.

        Returns:
            ConversionReport for the document.

        Raises:
            FileNotFoundError: If the source does not exist.
            ConversionError: If the source is not a .docx package.
        """
        if not os.path.isfile(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        with open(file_path, "rb") as f:
            data = f.read()

        converted, report = OfficeConverter.convert_bytes(data, options, source_name=file_path)

        if output_path is not None:
            with open(output_path, "wb") as f:
                f.write(converted)
        return report

    @staticmethod
    def convert_bytes(
        data: bytes,
        options: Optional[ConversionOptions] = None,
        source_name: str = "document",
    ) -> tuple[bytes, ConversionReport]:
        """Convert a .docx package held in memory."""
        options = options or ConversionOptions()
        report = ConversionReport(direction=options.direction)
        output = io.BytesIO()

        try:
            source = zipfile.ZipFile(io.BytesIO(data))
        except zipfile.BadZipFile as e:
            raise ConversionError(f"Not a .docx package: {source_name}") from e

        with source, zipfile.ZipFile(output, "w") as target:
            for info in source.infolist():
                content = source.read(info)
                if is_convertible_part(info.filename):
                    content = _convert_entry(info.filename, content, options, report)
                target.writestr(info, content)

        return output.getvalue(), report


def _convert_entry(
    name: str,
    content: bytes,
    options: ConversionOptions,
    report: ConversionReport,
) -> bytes:
    try:
        result = convert_part(
            content,
            options,
            is_style_part=is_style_part(name),
            part_name=name,
        )
    except MalformedPartError as e:
        logger.warning("Keeping %s unconverted: %s", name, e.reason)
        report.failed_parts[name] = e.reason
        return content

    report.record(name, result)
    return result.xml
