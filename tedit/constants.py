"""Constants and configuration for the tedit editor."""

class EditorConstants:
    """Central configuration constants for the editor."""
    
    # Display
    END_OF_DOCUMENT_MARKER = "~"  # Shown on screen rows past the last line
    NEW_FILE_LABEL = "[New File]"  # Status bar label when no file is open
    STATUS_BAR_ROWS = 1  # Rows reserved at the bottom for the status bar
    
    # Resize handling
    RESIZE_PIPE_MARKER = b'R'  # Byte written to pipe to signal resize
    
    # Logging
    LOG_FILENAME = "tedit.log"
    DEFAULT_LOG_LEVEL = "WARNING"
    
    # Settings
    APP_NAME = "tedit"
    APP_AUTHOR = "tedit"
    SETTINGS_FILENAME = "settings.json"
