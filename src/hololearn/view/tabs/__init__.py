"""Tab pages of the main window and the experiment control panel."""
