import pytest

from sdgengine.pool import DEFAULT_INITIAL_POOL_SIZE, Pool, PoolID, Poolable


class Item(Poolable):
    def __init__(self):
        super().__init__()
        self.payload = None


class Bare(Poolable):
    # Does not call the base initialiser; the pool must still manage it.
    def __init__(self):
        self.value = 0


def test_default_capacity():
    pool = Pool(Item)
    assert len(pool) == DEFAULT_INITIAL_POOL_SIZE


def test_check_out_returns_distinct_live_items():
    pool = Pool(Item, 4)
    items = [pool.check_out() for _ in range(4)]
    assert len({id(i) for i in items}) == 4
    assert all(i.pid.alive for i in items)
    assert len(pool) == 4


def test_pool_grows_by_doubling_plus_one():
    pool = Pool(Item, 4)
    for _ in range(5):
        pool.check_out()
    assert len(pool) == 4 * 2 + 1


def test_empty_pool_grows_on_demand():
    pool = Pool(Item, 0)
    assert len(pool) == 0
    item = pool.check_out()
    assert item.pid.alive
    assert len(pool) == 1


def test_given_back_item_is_reused_first():
    pool = Pool(Item, 3)
    a = pool.check_out()
    pool.check_out()
    pool.give_back(a)
    assert not a.pid.alive
    assert pool.check_out() is a


def test_return_all_frees_every_item():
    pool = Pool(Item, 3)
    items = [pool.check_out() for _ in range(3)]
    pool.return_all()
    assert not any(i.pid.alive for i in items)
    again = [pool.check_out() for _ in range(3)]
    assert {id(i) for i in again} == {id(i) for i in items}
    assert len(pool) == 3


def test_give_back_foreign_item_raises():
    first, second = Pool(Item, 1), Pool(Item, 1)
    item = first.check_out()
    with pytest.raises(ValueError):
        second.give_back(item)


def test_give_back_twice_raises():
    pool = Pool(Item, 2)
    item = pool.check_out()
    pool.give_back(item)
    with pytest.raises(ValueError):
        pool.give_back(item)


def test_factory_must_produce_poolable():
    with pytest.raises(TypeError):
        Pool(object, 1)


def test_subclass_without_base_init_is_managed():
    pool = Pool(Bare, 2)
    item = pool.check_out()
    assert item.pid.pool is pool
    assert item.pid.alive


def test_pool_ids_are_unique_and_compare_by_inner_id():
    pool = Pool(Item, 3)
    a, b = pool.check_out(), pool.check_out()
    assert not (a.pid == b.pid)
    clone = PoolID(index=99, inner_id=a.pid.inner_id, pool=pool)
    assert clone == a.pid


def test_pool_ids_from_different_pools_differ():
    a = Pool(Item, 1).check_out()
    b = Pool(Item, 1).check_out()
    assert a.pid.inner_id == b.pid.inner_id
    assert not (a.pid == b.pid)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Pool(Item, -1)