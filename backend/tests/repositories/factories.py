"""Record factories - minimal valid payloads for each entity (snake_case ORM names)."""


def project_data(**overrides) -> dict:
    data = {"title": "Project", "description": "A project"}
    data.update(overrides)
    return data


def blog_post_data(**overrides) -> dict:
    data = {
        "title": "Post", "slug": "post", "excerpt": "Short", "content": "Long",
    }
    data.update(overrides)
    return data


def service_data(**overrides) -> dict:
    data = {
        "title": "Service", "description": "We do things",
        "icon": "code", "color": "blue",
    }
    data.update(overrides)
    return data


def contact_data(**overrides) -> dict:
    data = {
        "first_name": "Ada", "last_name": "Lovelace",
        "email": "ada@example.com", "subject": "Hello", "message": "Hi there",
    }
    data.update(overrides)
    return data


def experience_data(**overrides) -> dict:
    data = {
        "company": "Acme", "position": "Engineer",
        "description": "Built things", "start_date": "2020-01",
    }
    data.update(overrides)
    return data


def education_data(**overrides) -> dict:
    data = {
        "institution": "University", "degree": "BSc",
        "start_date": "2012-09", "end_date": "2015-06",
    }
    data.update(overrides)
    return data


def certification_data(**overrides) -> dict:
    data = {"title": "Cert", "issuer": "Issuer", "issue_date": "2021-05"}
    data.update(overrides)
    return data
