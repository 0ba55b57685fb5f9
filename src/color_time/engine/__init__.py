"""
Interpolation engine - ring locator, weight calculator, blender, aging transforms
"""
