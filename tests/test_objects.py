from pongphysics.objects import GameObject, ObjectPool, ObjectType


def test_fetch_from_empty_pool_grows_by_batch():
    pool = ObjectPool()
    go = pool.fetch()
    assert len(pool) == 10
    assert go is pool.objects[0]
    assert go.active
    assert pool.active_count == 1


def test_fetch_grows_again_when_full():
    pool = ObjectPool(batch_size=2)
    first = pool.fetch()
    second = pool.fetch()
    third = pool.fetch()
    assert len(pool) == 4
    assert third is pool.objects[2]
    assert len({id(first), id(second), id(third)}) == 3


def test_release_and_reuse_returns_same_object():
    pool = ObjectPool(initial=3)
    a = pool.fetch()
    pool.fetch()
    pool.release(a)
    assert not a.active
    assert pool.fetch() is a
    assert len(pool) == 3


def test_release_twice_counts_once():
    pool = ObjectPool()
    go = pool.fetch()
    pool.release(go)
    pool.release(go)
    assert pool.active_count == 0


def test_fetch_resets_visibility_and_partner():
    pool = ObjectPool(initial=1)
    go = pool.fetch()
    go.visible = False
    go.other_wall = GameObject()
    pool.release(go)
    again = pool.fetch()
    assert again is go
    assert again.visible
    assert again.other_wall is None


def test_fetch_keeps_other_attributes():
    pool = ObjectPool(initial=1)
    go = pool.fetch()
    go.type = ObjectType.WALL
    go.mass = 7.0
    pool.release(go)
    again = pool.fetch()
    assert again.type is ObjectType.WALL
    assert again.mass == 7.0


def test_release_all_and_active_objects():
    pool = ObjectPool()
    fetched = [pool.fetch() for _ in range(4)]
    assert pool.active_objects() == fetched
    pool.release_all()
    assert pool.active_objects() == []
    assert pool.active_count == 0


def test_new_objects_use_default_type():
    pool = ObjectPool(default_type=ObjectType.ASTEROID)
    go = pool.fetch()
    assert go.type is ObjectType.ASTEROID
    assert all(o.type is ObjectType.ASTEROID for o in pool)


def test_game_objects_compare_by_identity():
    pool = ObjectPool(initial=3)
    pool.fetch()
    second = pool.fetch()
    # Fresh objects hold identical field values; lookup must still find the right one.
    assert pool.objects.index(second) == 1
    assert pool.objects.index(pool.objects[2]) == 2


def test_vector_fields_are_not_shared():
    a = GameObject()
    b = GameObject()
    a.pos.x = 3.0
    assert b.pos.x == 0.0