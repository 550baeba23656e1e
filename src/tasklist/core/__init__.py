"""
Core: ports, preferences and the task list controller.
"""
