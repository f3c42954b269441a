# Import the shape variants
from .circle import Circle
from .rectangle import Rectangle

# Import the union alias and the factory
from .base_shape import Shape, make_shape, display_name
