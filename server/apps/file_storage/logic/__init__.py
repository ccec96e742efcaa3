"""Business logic layer for file_storage app.

This package contains the vendor-neutral side of file storage:
- The FileMeta contract every backend implements
- Resource URLs pointing at the storage:get route
- Channel to filesystem resolution

Vendor SDK calls belong in the infrastructure package.
"""
