"""
Solr Spellcheck Service.

Spelling suggestions ("did you mean") and dictionary loading for a Solr-backed
portal search. Collaborators are wired through the Dishka provider in `di.py`.
"""

__version__ = "1.0.0"
