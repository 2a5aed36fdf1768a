"""Terminal front end: translated strings, rendering and the curses event loop."""
