"""Registry collaborators used by the search command.

- Index parsing: which registry index a search term targets
- Auth resolution: which credentials to send to that index
- Search client: the HTTP call that returns catalog entries
"""
