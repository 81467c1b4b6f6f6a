"""
Log management system for combat messages and debugging.

This module provides centralized logging with categorization, filtering,
and bounded storage. It listens to the engine's events so the engine never
writes log text anywhere itself.
"""
import os
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

from ..core.events import (
    DebugMessage,
    EventType,
    LogMessage as LogEvent,
    LogSaveRequested,
)

if TYPE_CHECKING:
    from ..core.events import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # System messages (initialization, saving, etc.)
    COMBAT = auto()     # Attacks, defenses, rests
    COUNTER = auto()    # Counter gauge and counter attacks
    BATTLE = auto()     # Match-level results such as defeats
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.COMBAT: "CMB",
    LogCategory.COUNTER: "CTR",
    LogCategory.BATTLE: "BTL",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


@dataclass
class LogEntry:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    level: LogLevel = LogLevel.INFO
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogManager:
    """Manages combat logging with categorization and filtering."""

    def __init__(
        self,
        event_manager: Optional["EventManager"] = None,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        log_dir: str = "logs",
    ):
        """Initialize the log manager.

        Args:
            event_manager: Event manager to collect log and combat events from
            max_messages: Maximum number of messages to keep in the buffer
            default_level: Minimum level shown by get_messages()
            log_dir: Directory that save_log_to_file() writes into
        """
        self.messages: deque[LogEntry] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.event_manager = event_manager
        self.log_dir = log_dir

        if self.event_manager is not None:
            self._setup_event_subscriptions(self.event_manager)

    def _setup_event_subscriptions(self, event_manager: "EventManager") -> None:
        """Set up event subscriptions for centralized logging."""
        event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="LogManager.log_message"
        )
        event_manager.subscribe(
            EventType.DEBUG_MESSAGE,
            self._handle_debug_message_event,
            subscriber_name="LogManager.debug_message"
        )
        event_manager.subscribe(
            EventType.LOG_SAVE_REQUESTED,
            self._handle_log_save_request,
            subscriber_name="LogManager.log_save_request"
        )

    def _handle_log_message_event(self, event) -> None:
        """Store a LogMessage event under its category and level."""
        if not isinstance(event, LogEvent):
            return

        try:
            category = LogCategory[event.category.upper()]
        except (KeyError, AttributeError):
            category = LogCategory.SYSTEM

        try:
            level = LogLevel[event.level.upper()]
        except (KeyError, AttributeError):
            level = LogLevel.INFO

        self.log(event.message, category, level)

    def _handle_debug_message_event(self, event) -> None:
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG, LogLevel.DEBUG)

    def _handle_log_save_request(self, event) -> None:
        if isinstance(event, LogSaveRequested):
            self.save_log_to_file()

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM,
            level: Optional[LogLevel] = None) -> None:
        """Add a message to the log.

        Args:
            text: The message text
            category: The category of the message
            level: Severity; derived from the category when omitted
        """
        if level is None:
            level = _default_level_for(category)
        self.messages.append(LogEntry(text=text, category=category, level=level))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        self.log(text, LogCategory.SYSTEM)

    def combat(self, text: str) -> None:
        self.log(text, LogCategory.COMBAT)

    def counter(self, text: str) -> None:
        self.log(text, LogCategory.COUNTER)

    def battle(self, text: str) -> None:
        self.log(text, LogCategory.BATTLE)

    def debug(self, text: str) -> None:
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        self.log(text, LogCategory.ERROR)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent messages, optionally filtered by category.

        Args:
            count: Maximum number of messages to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of messages, oldest first
        """
        if categories:
            filtered = [msg for msg in self.messages
                        if msg.category in categories and msg.category in self.enabled_categories]
        else:
            filtered = [msg for msg in self.messages
                        if msg.category in self.enabled_categories
                        and msg.level.value >= self.log_level.value]

        if count is not None and count < len(filtered):
            return filtered[-count:] if count > 0 else []
        return filtered

    def get_formatted_messages(self, count: Optional[int] = None) -> list[str]:
        """Get recent messages formatted for display."""
        return [msg.format() for msg in self.get_messages(count)]

    def clear(self) -> None:
        """Clear all messages from the log."""
        self.messages.clear()

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently enabled."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def save_log_to_file(self) -> Optional[str]:
        """Save all messages to a timestamped log file.

        Every buffered message is written regardless of the current filters.

        Returns:
            Path of the written file, or None if writing failed
        """
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        filepath = os.path.join(self.log_dir, f"combat_log_{timestamp}.log")

        try:
            os.makedirs(self.log_dir, exist_ok=True)

            with open(filepath, 'w', encoding='utf-8') as f:
                f.write("Streakduel - Combat Log\n")
                f.write(f"Generated: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
                f.write("=" * 60 + "\n\n")

                if not self.messages:
                    f.write("No messages to save.\n")
                for msg in self.messages:
                    timestamp_str = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
                    f.write(f"[{timestamp_str}] [{msg.category.name}] {msg.text}\n")
        except OSError as e:
            self.error(f"Failed to save log file: {e}")
            return None

        self.system(f"Combat log saved to {filepath}")
        return filepath


def _default_level_for(category: LogCategory) -> LogLevel:
    if category is LogCategory.DEBUG:
        return LogLevel.DEBUG
    if category is LogCategory.WARNING:
        return LogLevel.WARNING
    if category is LogCategory.ERROR:
        return LogLevel.ERROR
    return LogLevel.INFO
