"""エンティティ モジュール"""

from .particle import Particle, ParticleState
from .particle_system import ParticleSystem

__all__ = ["Particle", "ParticleState", "ParticleSystem"]
