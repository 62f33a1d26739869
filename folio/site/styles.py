"""Inline CSS used by the site shell and templates."""

CSS = r"""
:root {
  --bg: #ffffff;
  --fg: #1a1a1a;
  --muted: #6a6a6a;
  --border: #e3e3e3;
  --link: #0b5ed7;
  --serif: Georgia, "Times New Roman", serif;
  --sans: -apple-system, "Segoe UI", Roboto, "Helvetica Neue", sans-serif;
  --page-max: 744px;
}

html, body { height: 100%; margin: 0; }

body {
  font-family: var(--serif);
  font-size: 18px;
  line-height: 1.7;
  background: var(--bg);
  color: var(--fg);
  text-rendering: optimizeLegibility;
  -webkit-font-smoothing: antialiased;
}

a { color: var(--link); }

.layout { display: flex; flex-direction: column; min-height: 100vh; }

.layout > header {
  display: flex;
  justify-content: space-between;
  align-items: center;
  min-height: 4rem;
  padding: 0 2rem;
  font-family: var(--sans);
}

.layout > header a.site-title {
  text-decoration: none;
  color: inherit;
  text-transform: uppercase;
  font-weight: bold;
}

nav a { margin-right: 1rem; }
nav a:last-child { margin-right: 0; }

main {
  padding: 0 2rem;
  flex: 1;
  max-width: var(--page-max);
  width: 100%;
  margin: 0 auto;
  box-sizing: border-box;
}

footer { text-align: center; margin-bottom: 1rem; font-family: var(--sans); font-size: 14px; }

h1 { margin: 1.75rem 0 0 0; line-height: 1.2; }
.post-date { font-size: 0.85em; color: var(--muted); margin-bottom: 1.75rem; }
.featured-image { display: block; max-width: 100%; margin-bottom: 1.75rem; }
.bio { margin-top: 2rem; }
.muted { color: var(--muted); font-size: 0.85em; }

ul.post-nav {
  display: flex;
  flex-wrap: wrap;
  justify-content: space-between;
  list-style: none;
  padding: 0;
}

ul.posts { list-style: none; padding: 0; }
ul.posts li { margin-bottom: 1.75rem; }

pre {
  white-space: pre-wrap;
  word-break: break-word;
  padding: 0.5rem 0.75rem;
  border: 1px solid var(--border);
  background: #f6f6f6;
}

blockquote { margin: 0.75rem 0; padding: 0 0.75rem; border-left: 3px solid var(--border); color: var(--muted); }

hr { border: none; border-top: 1px solid var(--border); margin-bottom: 1.75rem; }

form.subscribe { font-family: var(--sans); padding: 1.5rem 2rem 2rem; margin-bottom: 1rem; border: 1px solid var(--border); }
form.subscribe input { display: block; width: 100%; box-sizing: border-box; margin-bottom: 1rem; padding: 0.5rem 1rem; }

@media (max-width: 700px) {
  .layout > header { padding: 0 1rem; }
  main { padding: 0 1rem; }
}
"""
