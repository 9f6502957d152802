"""
Data models for captured log entries.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class LogEntry(BaseModel):
    """A single message accepted by an in-memory sink."""
    
    message: str
    category: Optional[str] = None
    timestamp: datetime = Field(default_factory=datetime.now)
    
    def format(self) -> str:
        """Render the entry the way the forwarding sink writes it."""
        if self.category:
            return f"[{self.category}] {self.message}"
        return self.message
