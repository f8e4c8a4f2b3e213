"""Commands that change state. Callers commit the session afterwards."""
