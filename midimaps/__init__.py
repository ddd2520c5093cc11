"""midimaps: canonical MIDI controller maps to Ardour MIDI binding files."""
