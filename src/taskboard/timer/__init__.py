"""
Timer subsystem.

Components:
- timer_engine.py: countdown state machine bound to one selected task
- tick_scheduler.py: asyncio-backed recurring tick and its background loop
"""
