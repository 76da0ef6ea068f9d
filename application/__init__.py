"""
Application Layer for the Lifting Diary API.

This package contains:
- ports/: Abstract repository interfaces (what the application needs)
- services/: Join plan shared by use cases
- use_cases/: Owner-scoped workout retrieval
- exceptions.py: Retrieval failure taxonomy
"""
