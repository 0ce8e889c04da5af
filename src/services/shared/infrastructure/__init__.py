from .random_id_generator import RandomIdGenerator as RandomIdGenerator
