"""Unit tests for working-tree synchronization."""

import pytest

from gitlet.core.errors import FileNotInCommitError, UntrackedFileConflictError
from gitlet.core.store import ObjectStore
from gitlet.operations.checkout import CheckoutPlan, WorkingTreeSync


@pytest.fixture
def work_tree(tmp_path):
    path = tmp_path / 'work'
    (path / '.gitlet').mkdir(parents=True)
    return path


@pytest.fixture
def store(tmp_path):
    return ObjectStore(tmp_path / 'objects')


@pytest.fixture
def sync(work_tree, store):
    return WorkingTreeSync(work_tree, store)


def tree_of(store, files):
    return {path: store.put_blob(path, content) for path, content in files.items()}


def test_working_files_excludes_metadata(sync, work_tree):
    (work_tree / 'a.txt').write_text('a')
    (work_tree / '.gitlet' / 'HEAD').write_text('main')
    (work_tree / 'sub').mkdir()
    (work_tree / 'sub' / 'b.txt').write_text('b')
    (work_tree / '.hidden').write_text('h')
    assert sync.working_files() == ['.hidden', 'a.txt', 'sub/b.txt']


def test_reconcile_writes_and_deletes(sync, store, work_tree):
    current = tree_of(store, {'keep.txt': b'old', 'gone.txt': b'bye'})
    target = tree_of(store, {'keep.txt': b'new', 'dir/added.txt': b'hi'})
    (work_tree / 'keep.txt').write_bytes(b'old')
    (work_tree / 'gone.txt').write_bytes(b'bye')

    plan = sync.reconcile(current, target)

    assert (work_tree / 'keep.txt').read_bytes() == b'new'
    assert (work_tree / 'dir' / 'added.txt').read_bytes() == b'hi'
    assert not (work_tree / 'gone.txt').exists()
    assert plan.deletes == ['gone.txt']
    assert set(plan.writes) == {'keep.txt', 'dir/added.txt'}
    assert plan.file_count == 3


def test_untracked_by_both_left_alone(sync, store, work_tree):
    (work_tree / 'scratch.txt').write_text('mine')
    sync.reconcile({}, tree_of(store, {'a.txt': b'a'}))
    assert (work_tree / 'scratch.txt').read_text() == 'mine'


def test_conflict_touches_nothing(sync, store, work_tree):
    current = tree_of(store, {'tracked.txt': b'old'})
    target = tree_of(store, {'tracked.txt': b'new', 'x.txt': b'theirs', 'y.txt': b'theirs'})
    (work_tree / 'tracked.txt').write_bytes(b'old')
    (work_tree / 'x.txt').write_bytes(b'mine')
    (work_tree / 'y.txt').write_bytes(b'mine too')

    with pytest.raises(UntrackedFileConflictError) as exc_info:
        sync.reconcile(current, target)

    assert exc_info.value.paths == ['x.txt', 'y.txt']
    assert (work_tree / 'tracked.txt').read_bytes() == b'old'
    assert (work_tree / 'x.txt').read_bytes() == b'mine'


def test_directory_in_the_way_is_a_conflict(sync, store, work_tree):
    (work_tree / 'thing').mkdir()
    (work_tree / 'thing' / 'inner.txt').write_text('mine')
    target = tree_of(store, {'thing': b'file now'})
    with pytest.raises(UntrackedFileConflictError) as exc_info:
        sync.plan({}, target)
    assert exc_info.value.paths == ['thing/inner.txt']


def test_empty_directory_is_replaced_by_file(sync, store, work_tree):
    (work_tree / 'thing' / 'nested').mkdir(parents=True)
    sync.reconcile({}, tree_of(store, {'thing': b'file now'}))
    assert (work_tree / 'thing').read_bytes() == b'file now'


def test_tracked_directory_becomes_file(sync, store, work_tree):
    current = tree_of(store, {'thing/inner.txt': b'old'})
    (work_tree / 'thing').mkdir()
    (work_tree / 'thing' / 'inner.txt').write_bytes(b'old')

    sync.reconcile(current, tree_of(store, {'thing': b'file now'}))

    assert (work_tree / 'thing').read_bytes() == b'file now'


def test_untracked_file_where_parent_directory_goes(sync, store, work_tree):
    current = tree_of(store, {'old.txt': b'old'})
    target = tree_of(store, {'a/b.txt': b'nested'})
    (work_tree / 'old.txt').write_bytes(b'old')
    (work_tree / 'a').write_bytes(b'untracked')

    with pytest.raises(UntrackedFileConflictError) as exc_info:
        sync.reconcile(current, target)

    assert exc_info.value.paths == ['a']
    assert (work_tree / 'old.txt').read_bytes() == b'old'
    assert (work_tree / 'a').read_bytes() == b'untracked'


def test_tracked_file_where_parent_directory_goes(sync, store, work_tree):
    current = tree_of(store, {'a': b'was a file'})
    target = tree_of(store, {'a/b.txt': b'nested'})
    (work_tree / 'a').write_bytes(b'was a file')

    sync.reconcile(current, target)

    assert (work_tree / 'a' / 'b.txt').read_bytes() == b'nested'


def test_plan_does_not_touch_disk(sync, store, work_tree):
    current = tree_of(store, {'gone.txt': b'bye'})
    (work_tree / 'gone.txt').write_bytes(b'bye')

    plan = sync.plan(current, {})

    assert plan.deletes == ['gone.txt']
    assert (work_tree / 'gone.txt').exists()


def test_delete_prunes_empty_directories(sync, store, work_tree):
    current = tree_of(store, {'deep/er/file.txt': b'x'})
    (work_tree / 'deep' / 'er').mkdir(parents=True)
    (work_tree / 'deep' / 'er' / 'file.txt').write_bytes(b'x')

    sync.reconcile(current, {})

    assert not (work_tree / 'deep').exists()


def test_empty_plan():
    plan = CheckoutPlan()
    assert plan.file_count == 0


def test_restore_file(sync, store, work_tree):
    tree = tree_of(store, {'a.txt': b'committed'})
    (work_tree / 'a.txt').write_bytes(b'edited')
    sync.restore_file(tree, 'a.txt')
    assert (work_tree / 'a.txt').read_bytes() == b'committed'


def test_restore_file_not_tracked(sync):
    with pytest.raises(FileNotInCommitError):
        sync.restore_file({}, 'a.txt')


def test_restore_file_over_directory(sync, store, work_tree):
    tree = tree_of(store, {'a.txt': b'committed'})
    (work_tree / 'a.txt').mkdir()
    (work_tree / 'a.txt' / 'keep.txt').write_text('mine')

    with pytest.raises(UntrackedFileConflictError) as exc_info:
        sync.restore_file(tree, 'a.txt')

    assert exc_info.value.paths == ['a.txt']
    assert (work_tree / 'a.txt' / 'keep.txt').read_text() == 'mine'


def test_restore_file_below_a_file(sync, store, work_tree):
    tree = tree_of(store, {'dir/a.txt': b'committed'})
    (work_tree / 'dir').write_text('a file now')

    with pytest.raises(UntrackedFileConflictError) as exc_info:
        sync.restore_file(tree, 'dir/a.txt')

    assert exc_info.value.paths == ['dir']
    assert (work_tree / 'dir').read_text() == 'a file now'
