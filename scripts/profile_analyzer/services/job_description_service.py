#------------------------------------------------------------
#                 job_description_service.py
#        Loads a pasted job description from a text
#                    file or a PDF.

import os
import re
import sys
from typing import List, Optional
from pypdf import PdfReader
from pypdf.errors import PdfReadError

PDF_EXTENSION = ".pdf"
TEXT_ENCODING = "utf-8"
PDF_LINE_SEPARATOR = " "
MISSING_FILE_WARNING_TEMPLATE = "WARNING: job description file {path!r} not found"
UNREADABLE_PDF_WARNING_TEMPLATE = "WARNING: could not read job description PDF {path!r}: {error}"
UNDECODABLE_TEXT_WARNING_TEMPLATE = "WARNING: job description file {path!r} is not valid UTF-8: {error}"

def _normalize_line(text: str) -> str:
    value = (text or "").replace("•", "-").strip()
    return re.sub(r"[ \t]+", " ", value)

def _read_pdf_lines(pdf_path: str) -> List[str]:
    reader = PdfReader(pdf_path)

    lines: List[str] = []
    for page in reader.pages:
        try:
            extracted = page.extract_text() or ""
        except (PdfReadError, ValueError, KeyError):
            extracted = ""

        for raw_line in extracted.splitlines():
            normalized = _normalize_line(raw_line)
            if normalized:
                lines.append(normalized)
    return lines

# This function does load job description text from disk.
# PDF lines are joined with spaces so keywords at line breaks stay separate.
def load_job_description(path: Optional[str]) -> str:
    if not path:
        return ""
    if not os.path.exists(path):
        print(MISSING_FILE_WARNING_TEMPLATE.format(path=path), file=sys.stderr)
        return ""

    if path.lower().endswith(PDF_EXTENSION):
        try:
            return PDF_LINE_SEPARATOR.join(_read_pdf_lines(path))
        except PdfReadError as exc:
            print(UNREADABLE_PDF_WARNING_TEMPLATE.format(path=path, error=exc), file=sys.stderr)
            return ""

    try:
        with open(path, "r", encoding=TEXT_ENCODING) as file_handle:
            return file_handle.read()
    except UnicodeDecodeError as exc:
        print(UNDECODABLE_TEXT_WARNING_TEMPLATE.format(path=path, error=exc), file=sys.stderr)
        return ""
