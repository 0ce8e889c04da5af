from .id_generator import IdGenerator as IdGenerator
