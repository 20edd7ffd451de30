"""Bundled HTML templates and styles for rendered documents.

- main.html: page wrapper
- styles.css: preview stylesheet
- components/: one template per built-in component

Templates are accessed via the infrastructure.resources module.
"""
