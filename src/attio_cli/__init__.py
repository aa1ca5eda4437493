"""
attio-cli: Command-line client for the Attio CRM API.

Maps terminal invocations to Attio's REST API:
- Record CRUD, upsert and search for any object
- List entries, notes, tasks, comments and threads
- Meetings and call recordings (beta API)
- Webhook management
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
