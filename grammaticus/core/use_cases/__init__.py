from grammaticus.core.use_cases.render_label import Renderer, format_args
