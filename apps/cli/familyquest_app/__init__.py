"""FamilyQuest cards command-line application."""
