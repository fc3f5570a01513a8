"""SQLAlchemy table definitions for the blob store."""

from sqlalchemy import Column, DateTime, MetaData, String, Table, Text

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# BLOBS TABLE (key/value snapshots)
# ============================================================================
blobs_table = Table(
    "blobs",
    metadata,
    Column("key", String(255), primary_key=True),
    Column("value", Text, nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)
