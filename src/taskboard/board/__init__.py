"""
Board subsystem.

Components:
- time_values.py: TimeEstimate / Countdown arithmetic and lenient numeric parsing
- board_models.py: data structures (Task, BoardList, Board, ListStats) and errors
- board_store.py: pure board operations + BoardStore (current snapshot owner)
- board_api.py: small helpers that turn UI gestures into exactly one store call
- demo_data.py: starter board
"""
