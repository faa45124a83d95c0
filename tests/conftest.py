"""Shared pytest fixtures."""

import pytest

from template_binder.core.config import Settings


@pytest.fixture
def settings(tmp_path):
    """Settings writing logs to a temporary directory."""
    return Settings(log_dir=tmp_path / "logs", log_level="DEBUG")


@pytest.fixture
def resume_template_html():
    """A small resume template using every placeholder syntax."""
    return """<html>
<body>
  <header>
    <h1>{{fullName}}</h1>
    <p class="contact"><a href="mailto:[[FIELD:email]]">[[FIELD:email]]</a></p>
  </header>
  <section>
    <p>{{summary}}</p>
    {{#each workExperience}}
    <div class="job">
      <h3>{{jobTitle}}</h3>
      {{#if employer}}<span>{{employer}}</span>{{/if}}
    </div>
    {{/each}}
  </section>
</body>
</html>"""
