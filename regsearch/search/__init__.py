"""Search pipeline: filter parsing, ranking, filtering and table output.

The pipeline is:
- Parse the ``--filter`` expression into predicates
- Rank registry results by star count
- Drop results that fail the predicates
- Render the survivors as an aligned text table
"""
