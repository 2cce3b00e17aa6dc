"""Lookup tables translating unified values into platform vocabularies"""
