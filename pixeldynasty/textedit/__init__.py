"""Text-field editing engine: layout, cursor navigation, editing and undo/redo."""