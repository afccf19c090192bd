# ============================================
# tracker/parsers.py
# ============================================
from django.conf import settings
from rest_framework.parsers import BaseParser


class PlainTextParser(BaseParser):
    """Raw text request bodies, used for message edits"""
    media_type = 'text/plain'
    
    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get('encoding', settings.DEFAULT_CHARSET)
        return stream.read().decode(encoding)
