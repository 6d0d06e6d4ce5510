"""Attachment embedding: PDFs and images rasterized onto document pages."""

from __future__ import annotations

from paf_builder.embedding.embedder import AttachmentEmbedder

__all__ = ["AttachmentEmbedder"]
