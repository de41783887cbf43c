"""Typeahead — text editing engine with prefix autocomplete and undo/redo."""
