"""
Lameboy scenes
"""
