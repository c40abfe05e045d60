import uuid

from nofireballs import EntityId, FlameTurret, GameObjectRef, Helicopter, LocalHost, Prefab


def spawn_helicopter(host: LocalHost, short_name: str = "minicopter.entity") -> EntityId:
    return host.spawn(Prefab(short_name), Helicopter(GameObjectRef(uuid.uuid4().hex)))


def spawn_flame_turret(host: LocalHost, short_name: str = "flameturret.deployed") -> EntityId:
    return host.spawn(Prefab(short_name), FlameTurret(GameObjectRef(uuid.uuid4().hex)))
