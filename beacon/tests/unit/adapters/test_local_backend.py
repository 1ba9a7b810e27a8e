from beacon.adapters.local_backend import LocalBackend
from beacon.domain.entities import ProjectDetails, ProjectModel


def test_save_project_writes_under_projects_dir(tmp_path):
    backend = LocalBackend(root_dir=str(tmp_path))
    model = ProjectModel(title="Library Roof", project_id="l-1", server_name="example.com")

    project = backend.save_project(model)

    path = tmp_path / "projects" / "Library_Roof.beacon-project"
    assert backend.path_for(project) == path
    stored = ProjectDetails.from_bytes(path.read_bytes())
    assert stored == project.details
    assert stored.has_payment_url()


def test_save_project_overwrites_previous_file(tmp_path):
    backend = LocalBackend(root_dir=str(tmp_path))
    model = ProjectModel(title="Library Roof", description="first", project_id="l-1")
    backend.save_project(model)
    model.description = "second"

    project = backend.save_project(model)

    stored = ProjectDetails.from_bytes(backend.path_for(project).read_bytes())
    assert stored.description == "second"
