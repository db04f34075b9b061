from .random_points import generate_points, generate_byte_points, generate_circle_points

__all__ = ['generate_points', 'generate_byte_points', 'generate_circle_points']
