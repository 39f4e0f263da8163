"""
QuickDate Calendar Module

Date primitives shared by the parser and the renderer.
"""
