"""Session storage: named folders of append-only text logs.

Layout:
    ~/.craifter/sessions/
    ├── sessions.txt                       # Index: one session name per line
    └── <name>/
        ├── commands/<name>_command.txt    # Shell commands, replayed by playback
        ├── notes/<name>_note.txt          # Free-text notes, printed by playback
        ├── data/<name>_data.txt           # Free-text data (not played back)
        └── results/<name>_result.txt      # Free-text results (not played back)
"""
