"""Chargeback Letters - dispute and refund letter generation."""
