"""
Translations lookup service application package.

Answers "what translation data exists for this plugin, theme or core
release in this locale?" by calling a remote translation API and caching
successful answers for a fixed window.
"""
