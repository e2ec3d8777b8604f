"""
Règles métier : politiques de substitution alimentaire.
"""
