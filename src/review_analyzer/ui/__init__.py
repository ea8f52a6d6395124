"""User interfaces for Video Review Analyzer."""
