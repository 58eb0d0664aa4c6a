"""
The MODEL layer contains pure data structures and the wave physics.
It has NO knowledge of the GUI (Qt) or of how frames are painted.
"""
