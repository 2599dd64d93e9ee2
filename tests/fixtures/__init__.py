# Test fixtures module
from .sample_documents import (
    BIJOY_LOVE,
    BIJOY_SENTENCE,
    CONTENT_TYPES_XML,
    MIXED_SENTENCE,
    NSMAP,
    STYLES_XML,
    UNICODE_LOVE,
    UNICODE_SENTENCE,
    W_NS,
    build_docx,
    build_package,
    document_xml,
    paragraph_xml,
    parse,
    run_fonts,
    run_xml,
    runs,
    texts,
)
