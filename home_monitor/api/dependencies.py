"""
Request dependencies
"""

from fastapi import Request

from home_monitor.database.store import MonitorStore

def get_store(request: Request) -> MonitorStore:
    """Store constructed at startup and attached to the application"""
    return request.app.state.store
