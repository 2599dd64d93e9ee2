"""
Rewrite the text runs of a single WordprocessingML part.

A part is parsed with python-docx's oxml parser and every run is judged by
its fonts:

- Bijoy -> Unicode: runs in a SutonnyMJ/Bijoy font are converted and their
  fonts renamed; with force mode, runs in an unknown font are converted when
  the script classifier thinks their text is Bijoy.
- Unicode -> Bijoy: runs not in a known Latin font are split into one run per
  script segment, and the Bengali runs get the SutonnyMJ font. Paragraph
  marks are switched to SutonnyMJ as well since their font drives line
  spacing.

Style parts only get their font names replaced.
"""

import copy
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from docx.opc.oxml import serialize_part_xml
from docx.oxml import OxmlElement, parse_xml
from docx.oxml.ns import qn
from lxml import etree

from ..classifier import ScriptVerdict, classify_script
from ..config import (
    LEGACY_DIRECTION_IGNORED_FONTS,
    UNICODE_DIRECTION_IGNORED_FONTS,
    ConversionOptions,
    is_legacy_font,
    matches_font_list,
)
from .bijoy_to_unicode import convert_bijoy_to_unicode
from .unicode_to_bijoy import convert_segments

logger = logging.getLogger(__name__)

FONT_ATTRIBUTES = ("ascii", "hAnsi", "cs", "eastAsia")
LEGACY_FORCED_ATTRIBUTES = ("ascii", "hAnsi", "cs")
XML_SPACE = "{http://www.w3.org/XML/1998/namespace}space"

# Elements that may hold runs directly
RUN_CONTAINERS = {
    qn(f"w:{name}")
    for name in (
        "p", "hyperlink", "ins", "moveTo", "smartTag", "customXml",
        "sdtContent", "fldSimple", "bdo", "dir",
    )
}

# Children of w:pPr that must stay after w:rPr
_PPR_RPR_SUCCESSORS = (qn("w:sectPr"), qn("w:pPrChange"))


class ConversionError(Exception):
    """Raised when a document cannot be converted."""
    pass


class MalformedPartError(ConversionError):
    """Raised when a document part is not well-formed XML."""

    def __init__(self, part_name: str, reason: str):
        super().__init__(f"Cannot parse {part_name}: {reason}")
        self.part_name = part_name
        self.reason = reason


class ConversionDecision(Enum):
    """What to do with one run."""
    SKIP = "skip"
    CONVERT = "convert"
    HEURISTIC = "heuristic"  # convert text the classifier accepts


@dataclass
class TextRun:
    """A w:r element with the font information that drives conversion."""
    element: etree._Element
    ascii: Optional[str] = None
    h_ansi: Optional[str] = None
    cs: Optional[str] = None
    east_asia: Optional[str] = None
    run_style: Optional[str] = None
    paragraph_style: Optional[str] = None

    @classmethod
    def from_element(cls, run: etree._Element) -> "TextRun":
        rpr = run.find(qn("w:rPr"))
        rfonts = rpr.find(qn("w:rFonts")) if rpr is not None else None
        run_style = rpr.find(qn("w:rStyle")) if rpr is not None else None

        paragraph = next(run.iterancestors(qn("w:p")), None)
        paragraph_style = None
        if paragraph is not None:
            paragraph_style = paragraph.find(f"{qn('w:pPr')}/{qn('w:pStyle')}")

        def font(attr):
            return rfonts.get(qn(f"w:{attr}")) if rfonts is not None else None

        return cls(
            element=run,
            ascii=font("ascii"),
            h_ansi=font("hAnsi"),
            cs=font("cs"),
            east_asia=font("eastAsia"),
            run_style=run_style.get(qn("w:val")) if run_style is not None else None,
            paragraph_style=(
                paragraph_style.get(qn("w:val")) if paragraph_style is not None else None
            ),
        )

    @property
    def fonts(self) -> list[str]:
        return [f for f in (self.ascii, self.h_ansi, self.cs, self.east_asia) if f]

    @property
    def latin_fonts(self) -> list[str]:
        return [f for f in (self.ascii, self.h_ansi, self.cs) if f]

    @property
    def styles(self) -> list[str]:
        return [s for s in (self.run_style, self.paragraph_style) if s]

    @property
    def text_elements(self) -> list[etree._Element]:
        return self.element.findall(qn("w:t"))


@dataclass
class PartResult:
    """Outcome of converting one XML part."""
    xml: bytes
    changed: bool = False
    runs_converted: int = 0
    runs_split: int = 0
    runs_skipped: int = 0
    ambiguous_runs: int = 0
    structural_mismatches: int = 0


def decide(run: TextRun, options: ConversionOptions) -> ConversionDecision:
    """
    Decide from font metadata whether a run should be converted.

    Bijoy -> Unicode: a SutonnyMJ/Bijoy font always converts, a known Latin or
    Unicode Bengali font never does. Style names are only consulted when the
    fonts say neither. Anything else goes to the classifier in force mode.

    Unicode -> Bijoy: everything converts except runs in a known Latin font.
    """
    if not options.to_unicode:
        if any(matches_font_list(f, LEGACY_DIRECTION_IGNORED_FONTS) for f in run.latin_fonts):
            return ConversionDecision.SKIP
        return ConversionDecision.CONVERT

    is_legacy = any(is_legacy_font(f) for f in run.fonts)
    is_ignored = any(matches_font_list(f, UNICODE_DIRECTION_IGNORED_FONTS) for f in run.fonts)

    if not is_legacy and not is_ignored:
        is_legacy = any(is_legacy_font(s) for s in run.styles)
        is_ignored = any(matches_font_list(s, UNICODE_DIRECTION_IGNORED_FONTS) for s in run.styles)

    if is_legacy:
        return ConversionDecision.CONVERT
    if is_ignored or not options.force_convert:
        return ConversionDecision.SKIP
    return ConversionDecision.HEURISTIC


def _set_fonts(rfonts: etree._Element, name: str, attributes: tuple[str, ...]) -> bool:
    changed = False
    for attr in attributes:
        key = qn(f"w:{attr}")
        if rfonts.get(key) != name:
            rfonts.set(key, name)
            changed = True
    return changed


def _rename_present_fonts(run: etree._Element, name: str) -> None:
    rfonts = run.find(f"{qn('w:rPr')}/{qn('w:rFonts')}")
    if rfonts is None:
        return
    present = tuple(a for a in FONT_ATTRIBUTES if rfonts.get(qn(f"w:{a}")))
    _set_fonts(rfonts, name, present)


def _convert_run_to_unicode(run: TextRun, options: ConversionOptions, result: PartResult) -> None:
    decision = decide(run, options)
    if decision is ConversionDecision.SKIP:
        result.runs_skipped += 1
        return

    converted = False
    for t in run.text_elements:
        if not t.text:
            continue
        if decision is ConversionDecision.HEURISTIC:
            verdict = classify_script(t.text)
            if verdict is ScriptVerdict.AMBIGUOUS:
                result.ambiguous_runs += 1
            if not verdict.is_legacy:
                continue
        t.text = convert_bijoy_to_unicode(t.text)
        t.set(XML_SPACE, "preserve")
        converted = True

    if not converted:
        result.runs_skipped += 1
        return

    if decision is ConversionDecision.CONVERT:
        _rename_present_fonts(run.element, options.unicode_font)
    result.runs_converted += 1


def _new_run(template: etree._Element, rpr: Optional[etree._Element], content: list) -> etree._Element:
    """Build a run with the template's attributes, a copy of its rPr and content."""
    run = copy.deepcopy(template)
    for child in list(run):
        run.remove(child)
    run.tail = None
    if rpr is not None:
        run.append(copy.deepcopy(rpr))
    for child in content:
        run.append(child)
    return run


def _new_text(template: etree._Element, text: str) -> etree._Element:
    t = copy.deepcopy(template)
    t.text = text
    t.tail = None
    t.set(XML_SPACE, "preserve")
    return t


def _get_or_add_rpr(run: etree._Element) -> etree._Element:
    rpr = run.find(qn("w:rPr"))
    if rpr is None:
        rpr = OxmlElement("w:rPr")
        run.insert(0, rpr)
    return rpr


def _get_or_add_rfonts(rpr: etree._Element) -> etree._Element:
    rfonts = rpr.find(qn("w:rFonts"))
    if rfonts is None:
        rfonts = OxmlElement("w:rFonts")
        rstyle = rpr.find(qn("w:rStyle"))
        if rstyle is not None:
            rstyle.addnext(rfonts)
        else:
            rpr.insert(0, rfonts)
    return rfonts


def force_legacy_font(run: etree._Element, font: str) -> bool:
    """Put the legacy font on a run's ascii, hAnsi and cs slots."""
    rfonts = _get_or_add_rfonts(_get_or_add_rpr(run))
    return _set_fonts(rfonts, font, LEGACY_FORCED_ATTRIBUTES)


def _split_run_to_bijoy(run: TextRun, options: ConversionOptions, result: PartResult) -> None:
    if decide(run, options) is ConversionDecision.SKIP:
        result.runs_skipped += 1
        return

    element = run.element
    parent = element.getparent()
    if parent is None or parent.tag not in RUN_CONTAINERS:
        logger.debug("Leaving run under %s untouched", parent.tag if parent is not None else None)
        result.structural_mismatches += 1
        return

    rpr = element.find(qn("w:rPr"))
    new_runs = []
    pending = []
    split = False

    for child in [c for c in element if c is not rpr]:
        if child.tag == qn("w:t") and child.text:
            segments = convert_segments(child.text, font=options.legacy_font)
            if any(s.is_bengali for s in segments):
                split = True
                if pending:
                    new_runs.append(_new_run(element, rpr, pending))
                    pending = []
                # Segments are normalised on their own, so a mark before a Latin segment gets no space
                for segment in segments:
                    new_run = _new_run(element, rpr, [_new_text(child, segment.output)])
                    if segment.font:
                        force_legacy_font(new_run, segment.font)
                    new_runs.append(new_run)
                continue
        pending.append(child)

    if not split:
        result.runs_skipped += 1
        return

    if pending:
        new_runs.append(_new_run(element, rpr, pending))
    new_runs[-1].tail = element.tail

    index = parent.index(element)
    parent.remove(element)
    for offset, new_run in enumerate(new_runs):
        parent.insert(index + offset, new_run)

    result.runs_split += 1
    result.runs_converted += 1


def force_paragraph_mark_font(paragraph: etree._Element, font: str) -> bool:
    """
    Put the legacy font on a paragraph mark (w:pPr/w:rPr/w:rFonts).

    Returns:
        True if the paragraph was modified.
    """
    created = False
    ppr = paragraph.find(qn("w:pPr"))
    if ppr is None:
        ppr = OxmlElement("w:pPr")
        paragraph.insert(0, ppr)
        created = True

    rpr = ppr.find(qn("w:rPr"))
    if rpr is None:
        rpr = OxmlElement("w:rPr")
        successor = next((c for c in ppr if c.tag in _PPR_RPR_SUCCESSORS), None)
        if successor is not None:
            successor.addprevious(rpr)
        else:
            ppr.append(rpr)
        created = True

    return _set_fonts(_get_or_add_rfonts(rpr), font, LEGACY_FORCED_ATTRIBUTES) or created


def _rename_style_fonts(root: etree._Element, font: str) -> int:
    renamed = 0
    for rfonts in root.iter(qn("w:rFonts")):
        for attr in FONT_ATTRIBUTES:
            key = qn(f"w:{attr}")
            if is_legacy_font(rfonts.get(key)):
                rfonts.set(key, font)
                renamed += 1
    return renamed


def parse_part(xml: Union[str, bytes], part_name: str = "part") -> etree._Element:
    """
    Parse a part into python-docx element classes.

    Raises:
        MalformedPartError: If the XML is not well formed.
    """
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    try:
        return parse_xml(xml)
    except etree.XMLSyntaxError as e:
        raise MalformedPartError(part_name, str(e)) from e


def convert_part(
    xml: Union[str, bytes],
    options: ConversionOptions,
    is_style_part: bool = False,
    part_name: str = "part",
) -> PartResult:
    """
    Convert the text of one XML part in place and serialise it again.

    Args:
        xml: Part content.
        options: Direction and force mode.
        is_style_part: True for style definitions, where only font names
            are rewritten.
        part_name: Used in error messages and logs.

    Returns:
        PartResult with the new XML and run counters. When nothing changed,
        ``xml`` is the input unchanged.

    Raises:
        MalformedPartError: If the XML is not well formed.
    """
    root = parse_part(xml, part_name)
    original = xml.encode("utf-8") if isinstance(xml, str) else xml
    result = PartResult(xml=original)

    if is_style_part:
        if options.to_unicode:
            result.changed = _rename_style_fonts(root, options.unicode_font) > 0
    elif options.to_unicode:
        for run in list(root.iter(qn("w:r"))):
            _convert_run_to_unicode(TextRun.from_element(run), options, result)
        result.changed = result.runs_converted > 0
    else:
        # Snapshot first: splitting replaces runs in the tree
        for run in [TextRun.from_element(r) for r in root.iter(qn("w:r"))]:
            _split_run_to_bijoy(run, options, result)
        marks_changed = False
        for paragraph in root.iter(qn("w:p")):
            marks_changed = force_paragraph_mark_font(paragraph, options.legacy_font) or marks_changed
        result.changed = result.runs_split > 0 or marks_changed

    logger.debug(
        "%s: %d converted, %d split, %d skipped, %d ambiguous",
        part_name, result.runs_converted, result.runs_split,
        result.runs_skipped, result.ambiguous_runs,
    )

    if result.changed:
        result.xml = serialize_part_xml(root)
    return result
