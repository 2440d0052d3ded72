# =============================================================================
# core/guides.py  —  Resource Texts & Install Commands
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Produces the text behind the MCP resources: a registry overview rendered
#   from the live index, plus two static markdown guides.  Also builds the
#   precast-ui install commands the tools hand back.
#
#   Every function here returns a fresh string per call.  Nothing is cached at
#   this layer beyond what the registry client caches.
# =============================================================================

from core.models import RegistryIndex

NPM_INSTALL = "npm install -g precast-ui"


def install_command(component_url: str) -> str:
    return f'precast-ui add "{component_url}"'


def install_usage(component_url: str) -> str:
    """Step-by-step install instructions for one component."""
    return "\n".join([
        "# Install the precast-ui CLI globally",
        NPM_INSTALL,
        "",
        "# Install the component",
        install_command(component_url),
        "",
        "# Use in your React app",
        "import { ComponentName } from '@brutalist-ui/components'",
    ])


def render_overview(index: RegistryIndex) -> str:
    """Plain-text overview of the registry, rebuilt from the current index."""
    featured = sum(1 for c in index.components if c.featured)
    maintainer = index.meta.maintainer if index.meta else "Brutalist UI Team"
    last_updated = index.meta.last_updated if index.meta else "Not specified"
    example_url = f"{index.base_url.rstrip('/')}/COMPONENT_NAME"

    return f"""
# Brutalist UI Registry Overview

{index.description}

## Registry Information
- **Name**: {index.name}
- **Framework**: {index.framework}
- **Version**: {index.version}
- **Total Components**: {len(index.components)}
- **Featured Components**: {featured}
- **Categories**: {len(index.categories)}

## Base URL
{index.base_url}

## Maintainer
{maintainer}

## Last Updated
{last_updated}

## Installation
To use any component from this registry:

1. Install the precast-ui CLI:
   ```bash
   {NPM_INSTALL}
   ```

2. Install a component:
   ```bash
   {install_command(example_url)}
   ```

3. Import and use in your React app:
   ```jsx
   import {{ ComponentName }} from '@brutalist-ui/components'
   ```
""".strip()


INSTALLATION_GUIDE = """
# Brutalist UI Installation Guide

## Prerequisites
- Node.js 18+
- React 16.8+
- A React project (Next.js, Vite, Create React App, etc.)

## Step 1: Install the CLI
Install the precast-ui CLI globally:

```bash
npm install -g precast-ui
```

## Step 2: Install Components
Install individual components from the registry:

```bash
# Install a specific component
precast-ui add "https://brutalist.precast.dev/registry/react/button"

# Install multiple components
precast-ui add "https://brutalist.precast.dev/registry/react/button" "https://brutalist.precast.dev/registry/react/card"
```

## Step 3: Use Components
Import and use components in your React application:

```jsx
import React from 'react'
import { Button, Card } from '@brutalist-ui/components'

function App() {
  return (
    <div>
      <Card>
        <Card.Header>
          <h2>Welcome to Brutalist UI</h2>
        </Card.Header>
        <Card.Body>
          <p>Bold, unapologetic, and functional components.</p>
          <Button variant="primary">Get Started</Button>
        </Card.Body>
      </Card>
    </div>
  )
}

export default App
```

## Component Structure
Each component includes:
- **TypeScript source code** with full type definitions
- **CSS modules** for styling
- **Documentation** and usage examples
- **Dependencies** automatically handled

## Styling
Components use CSS modules and CSS custom properties for theming. The brutalist design system includes:
- Thick borders (3px+)
- Bold shadows
- High contrast colors
- Sharp corners (no border-radius)
- Monospace typography for code elements

## Browser Support
- Chrome 90+
- Firefox 88+
- Safari 14+
- Edge 90+
""".strip()


BRUTALIST_FEATURES_GUIDE = """
# Brutalist Design Principles

Brutalist UI embraces the raw, uncompromising aesthetic of brutalist architecture in digital design.

## Core Principles

### 1. Thick Borders
- Minimum 3px borders on interactive elements
- Bold, uncompromising outlines
- Clear definition between components

### 2. Bold Shadows
- Heavy drop shadows for depth
- No subtle gradients or soft shadows
- Strong visual hierarchy through shadow weight

### 3. Sharp Corners
- Zero border-radius (sharp 90-degree corners)
- No rounded edges or organic shapes
- Geometric precision in all components

### 4. High Contrast
- Bold color combinations
- Strong text contrast ratios (4.5:1 minimum)
- Clear visual distinction between states

### 5. Monospace Typography
- Code elements use monospace fonts
- Technical, utilitarian aesthetic
- Consistent character spacing

### 6. Functional Over Decorative
- Every visual element serves a purpose
- No gratuitous animations or effects
- Form follows function

## Component Features

Components may include these brutalist features:

- `hasThickBorders`: Bold border treatment
- `hasShadows`: Heavy shadow effects
- `hasSharpCorners`: No border radius
- `hasHighContrast`: Bold color schemes
- `hasAnimations`: Functional micro-interactions
- `hasGlitchEffects`: Digital distortion effects

## Theme Variants

- **Classic**: Traditional brutalist principles
- **Modern**: Contemporary interpretation
- **Experimental**: Pushing boundaries further

## Usage Philosophy

> "The component should speak its function plainly, without decoration or apology."

Brutalist UI components are designed for developers who value:
- Clarity over aesthetics
- Function over form
- Boldness over subtlety
- Honesty in digital materials
""".strip()
