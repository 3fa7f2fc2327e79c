from .text import cleanup_llm_output, extract_html_document, preview_html_document

__all__ = ["cleanup_llm_output", "extract_html_document", "preview_html_document"]
