"""Convert Archivematica METS documents into per-file JSON manifests."""
