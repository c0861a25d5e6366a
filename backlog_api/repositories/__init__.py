# Repositories package init
"""
Backlog API - Repositories Layer
================================

What:  Table-level persistence gateways. One repository per entity, each bound
       to the session of the current request.

Repository Inventory:
    - BacklogItemRepository: find_all, find_by_id, save (upsert), delete_by_id
"""
