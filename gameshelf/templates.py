INDEX_HTML = r"""<!doctype html>
<html lang="en" data-bs-theme="dark">
<head>
  <meta charset="utf-8">
  <title>{{ app_title }}</title>
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <link href="https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css" rel="stylesheet">
  <style>
    .card { border: 1px solid rgba(255,255,255,.08); }
    .title { white-space: nowrap; overflow: hidden; text-overflow: ellipsis; }
    .path { color: rgba(255,255,255,.6); }
    .unsupported { opacity: .6; }
  </style>
</head>
<body>
<nav class="navbar navbar-expand-lg bg-body-tertiary px-3">
  <a class="navbar-brand" href="{{ url_for('gameshelf.index') }}">{{ app_title }}</a>
  <form class="ms-auto d-flex gap-2" method="get" action="{{ url_for('gameshelf.index') }}">
    <input class="form-control form-control-sm" type="search" name="q" value="{{ query or '' }}" placeholder="Filter by name">
    <select class="form-select form-select-sm" name="platform">
      <option value="" {% if not platform %}selected{% endif %}>All platforms</option>
      {% for label in platform_labels %}
        <option value="{{ label }}" {% if platform == label %}selected{% endif %}>{{ label }}</option>
      {% endfor %}
    </select>
    <button class="btn btn-outline-light btn-sm" type="submit">Filter</button>
  </form>
</nav>

<div class="container py-4">
  {% with messages = get_flashed_messages() %}
    {% if messages %}
      <div class="alert alert-warning">{{ messages|join('. ') }}</div>
    {% endif %}
  {% endwith %}

  {% if not games %}
    <div class="text-center py-5">
      <h4>No games found in <code>{{ root }}</code>.</h4>
      <p class="text-secondary">Add one folder per game with its .sh, .x86_64 or .exe launcher at the top level.</p>
    </div>
  {% else %}
  <div class="row row-cols-1 row-cols-sm-2 row-cols-md-3 row-cols-xl-4 g-4">
    {% for g in games %}
      <div class="col">
        <div class="card h-100 shadow-sm {% if not g.launchers %}unsupported{% endif %}">
          <div class="card-body d-flex flex-column">
            <div class="title fw-semibold" title="{{ g.title }}">{{ g.title }}</div>
            <div class="small path mt-1">{{ g.directory }}</div>
            <div class="mt-2">
              <span class="badge text-bg-{{ 'success' if g.platform == 'native' else ('info' if g.platform else 'secondary') }}">
                {{ g.platform or 'unknown platform' }}
              </span>
            </div>
            {% if g.launchers and g.id %}
              <form class="mt-auto pt-3 d-flex gap-2" method="post" action="{{ url_for('gameshelf.launch', game_id=g.id) }}">
                <select class="form-select form-select-sm" name="launcher">
                  {% for l in g.launchers %}
                    <option value="{{ l }}">{{ l }}</option>
                  {% endfor %}
                </select>
                <button class="btn btn-success btn-sm" type="submit">Play</button>
              </form>
            {% else %}
              <span class="badge text-bg-secondary mt-auto align-self-start">No launcher</span>
            {% endif %}
          </div>
        </div>
      </div>
    {% endfor %}
  </div>
  {% endif %}
</div>
</body>
</html>
"""
