# Services package init
"""
Backlog API - Services Layer
============================

What:  Operations sitting between routes (HTTP) and repositories (persistence).

Service Inventory:
    - BacklogItemService: list/get/create/update/delete, not-found and
      storage-error translation
"""
