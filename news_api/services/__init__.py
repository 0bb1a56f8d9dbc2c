# Services package.
#
# Each module exposes a focused set of async functions that run
# parameterized queries for a single table and shape the rows into plain
# response dicts:
#
#   article_service - list / detail / atomic vote increment for Article
#   comment_service - list and append comments on an Article
#   topic_service   - read-only Topic listing
#   user_service    - read-only User lookups
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  "Not found" is signalled by returning None.
