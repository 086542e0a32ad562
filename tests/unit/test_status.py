"""Unit tests for status computation."""

from gitlet.operations.status import StatusReport


def test_clean_repository(repo_with_commits):
    report = repo_with_commits.status()
    assert report.current_branch == 'main'
    assert report.branches == ['main']
    assert report.is_clean


def test_branches_listed(repo):
    repo.branch('feature')
    repo.branch('alpha')
    assert repo.status().branches == ['alpha', 'feature', 'main']


def test_staged_and_removed(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'new.txt').write_text('new')
    repo.add('new.txt')
    repo.remove('file2.txt')

    report = repo.status()

    assert report.staged == ['new.txt']
    assert report.removed == ['file2.txt']
    assert report.modified == []
    assert report.untracked == []


def test_tracked_file_modified(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').write_text('changed')
    assert repo.status().modified == [('file1.txt', 'modified')]


def test_tracked_file_deleted(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'file1.txt').unlink()
    assert repo.status().modified == [('file1.txt', 'deleted')]


def test_staged_then_changed(repo):
    (repo.work_tree / 'a.txt').write_text('one')
    repo.add('a.txt')
    (repo.work_tree / 'a.txt').write_text('two')
    assert repo.status().modified == [('a.txt', 'modified')]


def test_staged_then_deleted(repo):
    (repo.work_tree / 'a.txt').write_text('one')
    repo.add('a.txt')
    (repo.work_tree / 'a.txt').unlink()
    assert repo.status().modified == [('a.txt', 'deleted')]


def test_untracked(repo_with_commits):
    repo = repo_with_commits
    (repo.work_tree / 'z.txt').write_text('z')
    (repo.work_tree / 'a.txt').write_text('a')
    assert repo.status().untracked == ['a.txt', 'z.txt']


def test_removed_then_recreated_is_untracked(repo_with_commits):
    repo = repo_with_commits
    repo.remove('file1.txt')
    (repo.work_tree / 'file1.txt').write_text('back again')

    report = repo.status()

    assert report.removed == ['file1.txt']
    assert report.untracked == ['file1.txt']
    assert report.modified == []


def test_report_is_clean_flag():
    assert StatusReport(current_branch='main').is_clean
    assert not StatusReport(current_branch='main', untracked=['x']).is_clean
