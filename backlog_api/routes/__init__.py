# Routes package init
"""
Backlog API - Routes Package
============================

Route Inventory:
    - backlog_items.py:  GET/POST        /backlog-items
                         GET/PUT/DELETE  /backlog-items/{id}
    - health.py:         GET             /health

Routes handle HTTP concerns only (path/body extraction, status codes) and
delegate to services.
"""
