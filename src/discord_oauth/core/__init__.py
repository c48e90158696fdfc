"""Core provider logic"""
