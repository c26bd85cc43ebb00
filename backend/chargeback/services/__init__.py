"""Chargeback Letters - Services"""
