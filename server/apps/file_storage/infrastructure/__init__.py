"""Infrastructure layer for file_storage app.

This package contains integrations with external systems:
- Storage backends (Django storages, Aliyun OSS)
- MIME type detection and image type allow-lists

Keep vendor concerns out of the logic layer.
"""
